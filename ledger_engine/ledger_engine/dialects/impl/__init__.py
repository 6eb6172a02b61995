"""Concrete dialect implementations, one class per backend."""

from ledger_engine.dialects.impl.base import BaseDialect
from ledger_engine.dialects.impl.mysql import MySQLDialect, TiDBDialect
from ledger_engine.dialects.impl.oracle import OracleDialect
from ledger_engine.dialects.impl.postgres import PostgresDialect, RedshiftDialect
from ledger_engine.dialects.impl.sqlite import Sqlite3Dialect

__all__ = [
    "BaseDialect",
    "MySQLDialect",
    "OracleDialect",
    "PostgresDialect",
    "RedshiftDialect",
    "Sqlite3Dialect",
    "TiDBDialect",
]
