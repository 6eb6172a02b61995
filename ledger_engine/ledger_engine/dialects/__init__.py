"""Dialects: backend-specific SQL for the migration version table.

Usage::

    from ledger_engine.dialects import get_dialect

    dialect = get_dialect("postgres")
    ddl = dialect.create_version_table_sql()
    with engine.begin() as conn:
        conn.exec_driver_sql(ddl)
        dialect.db_run_aux(conn)

Each backend is a frozen dataclass bound to one table name.  New backends
implement :class:`SqlDialect` and are added to the registry in
``_factory``; nothing above this package changes.
"""

from ._factory import (
    DEFAULT_DIALECT,
    available_dialects,
    dialect_for_url,
    ensure_compatible_backend,
    get_active_dialect,
    get_dialect,
    reset_active_dialect,
    resolve_dialect_name,
    set_active_dialect,
)
from ._protocols import SqlDialect
from ._types import (
    AuxiliarySetupError,
    DialectError,
    DialectMismatchError,
    DialectName,
    PlaceholderStyle,
    UnknownDialectError,
    VersionRow,
    decode_applied,
)
from .impl import (
    BaseDialect,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    RedshiftDialect,
    Sqlite3Dialect,
    TiDBDialect,
)

__all__ = [
    # Registry
    "DEFAULT_DIALECT",
    "available_dialects",
    "dialect_for_url",
    "ensure_compatible_backend",
    "get_active_dialect",
    "get_dialect",
    "reset_active_dialect",
    "resolve_dialect_name",
    "set_active_dialect",
    # Protocol
    "SqlDialect",
    # Implementations
    "BaseDialect",
    "MySQLDialect",
    "OracleDialect",
    "PostgresDialect",
    "RedshiftDialect",
    "Sqlite3Dialect",
    "TiDBDialect",
    # Types
    "DialectName",
    "PlaceholderStyle",
    "VersionRow",
    "decode_applied",
    # Exceptions
    "DialectError",
    "UnknownDialectError",
    "DialectMismatchError",
    "AuxiliarySetupError",
]
