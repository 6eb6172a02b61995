"""PostgreSQL and Redshift dialects (numbered ``$n`` placeholders)."""

from __future__ import annotations

from dataclasses import dataclass

from ledger_engine.dialects._types import DialectName, PlaceholderStyle
from ledger_engine.dialects.impl.base import BaseDialect


@dataclass(frozen=True)
class PostgresDialect(BaseDialect):
    name = DialectName.POSTGRES
    placeholder_style = PlaceholderStyle.NUMBERED

    def create_version_table_sql(self) -> str:
        return (
            f"CREATE TABLE {self.table_name} ("
            "id serial NOT NULL, "
            "version_id bigint NOT NULL, "
            "is_applied boolean NOT NULL, "
            "tstamp timestamp NULL DEFAULT now(), "
            "PRIMARY KEY(id));"
        )


@dataclass(frozen=True)
class RedshiftDialect(BaseDialect):
    """Redshift has no ``serial``; ids come from an identity column."""

    name = DialectName.REDSHIFT
    placeholder_style = PlaceholderStyle.NUMBERED

    def create_version_table_sql(self) -> str:
        return (
            f"CREATE TABLE {self.table_name} ("
            "id integer NOT NULL identity(1, 1), "
            "version_id bigint NOT NULL, "
            "is_applied boolean NOT NULL, "
            "tstamp timestamp NULL DEFAULT sysdate, "
            "PRIMARY KEY(id));"
        )
