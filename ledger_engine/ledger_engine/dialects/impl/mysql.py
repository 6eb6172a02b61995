"""MySQL and TiDB dialects (``?`` placeholders)."""

from __future__ import annotations

from dataclasses import dataclass

from ledger_engine.dialects._types import DialectName, PlaceholderStyle
from ledger_engine.dialects.impl.base import BaseDialect


@dataclass(frozen=True)
class MySQLDialect(BaseDialect):
    """``serial`` is MySQL shorthand for ``BIGINT UNSIGNED NOT NULL AUTO_INCREMENT UNIQUE``."""

    name = DialectName.MYSQL
    placeholder_style = PlaceholderStyle.QMARK

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
class TiDBDialect(BaseDialect):
    name = DialectName.TIDB
    placeholder_style = PlaceholderStyle.QMARK

    def create_version_table_sql(self) -> str:
        return (
            f"CREATE TABLE {self.table_name} ("
            "id BIGINT UNSIGNED NOT NULL AUTO_INCREMENT UNIQUE, "
            "version_id bigint NOT NULL, "
            "is_applied boolean NOT NULL, "
            "tstamp timestamp NULL DEFAULT now(), "
            "PRIMARY KEY(id));"
        )
