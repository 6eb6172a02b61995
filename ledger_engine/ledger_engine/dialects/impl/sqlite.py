"""SQLite dialect."""

from __future__ import annotations

from dataclasses import dataclass

from ledger_engine.dialects._types import DialectName, PlaceholderStyle
from ledger_engine.dialects.impl.base import BaseDialect


@dataclass(frozen=True)
class Sqlite3Dialect(BaseDialect):
    # AUTOINCREMENT only works on an inline INTEGER PRIMARY KEY, so there
    # is no trailing PRIMARY KEY(id) clause.  Booleans are stored as 0/1.
    name = DialectName.SQLITE3
    placeholder_style = PlaceholderStyle.QMARK

    def create_version_table_sql(self) -> str:
        return (
            f"CREATE TABLE {self.table_name} ("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "version_id INTEGER NOT NULL, "
            "is_applied INTEGER NOT NULL, "
            "tstamp TIMESTAMP DEFAULT (datetime('now')));"
        )
