"""Dialect registry.

:func:`get_dialect` builds an immutable dialect from a backend identifier
with no global side effects; runners should create one at startup and
pass it down explicitly.  The process-wide active selection
(:func:`get_active_dialect` / :func:`set_active_dialect`) is kept for
callers that cannot thread a value through, and is lock-protected.
"""

from __future__ import annotations

import logging
import threading

from sqlalchemy.engine import make_url

from ._protocols import SqlDialect
from ._types import DialectMismatchError, DialectName, UnknownDialectError
from .impl import (
    BaseDialect,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    RedshiftDialect,
    Sqlite3Dialect,
    TiDBDialect,
)

logger = logging.getLogger(__name__)

DEFAULT_DIALECT = DialectName.POSTGRES

_DIALECT_CLASSES: dict[DialectName, type[BaseDialect]] = {
    DialectName.POSTGRES: PostgresDialect,
    DialectName.MYSQL: MySQLDialect,
    DialectName.SQLITE3: Sqlite3Dialect,
    DialectName.REDSHIFT: RedshiftDialect,
    DialectName.TIDB: TiDBDialect,
    DialectName.ORACLE: OracleDialect,
}

# SQLAlchemy backend names each dialect can run against.
_COMPATIBLE_BACKENDS: dict[DialectName, frozenset[str]] = {
    DialectName.POSTGRES: frozenset({"postgresql"}),
    DialectName.MYSQL: frozenset({"mysql", "mariadb"}),
    DialectName.SQLITE3: frozenset({"sqlite"}),
    DialectName.REDSHIFT: frozenset({"redshift", "postgresql"}),
    DialectName.TIDB: frozenset({"tidb", "mysql"}),
    DialectName.ORACLE: frozenset({"oracle"}),
}

# Dialect picked when only a database URL is known.
_BACKEND_DEFAULTS: dict[str, DialectName] = {
    "postgresql": DialectName.POSTGRES,
    "mysql": DialectName.MYSQL,
    "mariadb": DialectName.MYSQL,
    "sqlite": DialectName.SQLITE3,
    "redshift": DialectName.REDSHIFT,
    "tidb": DialectName.TIDB,
    "oracle": DialectName.ORACLE,
}

_lock = threading.Lock()
_active: SqlDialect | None = None


def resolve_dialect_name(name: str | DialectName) -> DialectName:
    """Map a backend identifier to :class:`DialectName`.

    Raises:
        UnknownDialectError: If *name* is not one of the recognised
            identifiers.  Matching is exact.
    """
    if isinstance(name, DialectName):
        return name
    try:
        return DialectName(name)
    except ValueError:
        raise UnknownDialectError(str(name)) from None


def available_dialects() -> list[DialectName]:
    """Return every registered backend identifier, in registration order."""
    return list(_DIALECT_CLASSES)


def get_dialect(name: str | DialectName, table_name: str | None = None) -> SqlDialect:
    """Construct the dialect for *name*.

    Args:
        name: Backend identifier (``postgres``, ``mysql``, ``sqlite3``,
            ``redshift``, ``tidb``, ``oracle``).
        table_name: Version table to target.  Defaults to the configured
            name from :func:`ledger_engine.naming.version_table_name`.

    Raises:
        UnknownDialectError: If *name* is not recognised.
        ValueError: If *table_name* is not a valid identifier.
    """
    dialect_cls = _DIALECT_CLASSES[resolve_dialect_name(name)]
    if table_name is None:
        return dialect_cls()
    return dialect_cls(table_name=table_name)


def dialect_for_url(database_url: str) -> DialectName:
    """Return the dialect matching the backend of *database_url*.

    Raises:
        UnknownDialectError: If no dialect supports the URL's backend.
    """
    backend = make_url(database_url).get_backend_name()
    try:
        return _BACKEND_DEFAULTS[backend]
    except KeyError:
        raise UnknownDialectError(backend) from None


def ensure_compatible_backend(name: str | DialectName, backend: str) -> None:
    """Raise :class:`DialectMismatchError` unless *name* can run on *backend*.

    *backend* is a SQLAlchemy backend name such as ``engine.dialect.name``.
    """
    dialect = resolve_dialect_name(name)
    if backend not in _COMPATIBLE_BACKENDS[dialect]:
        raise DialectMismatchError(dialect, backend)


def get_active_dialect() -> SqlDialect:
    """Return the process-wide active dialect.

    Lazily constructs the default (postgres) on first access.
    """
    global _active
    if _active is not None:
        return _active

    with _lock:
        # Double-checked locking
        if _active is None:
            _active = get_dialect(DEFAULT_DIALECT)
        return _active


def set_active_dialect(name: str | DialectName) -> SqlDialect:
    """Replace the process-wide active dialect and return it.

    On an unknown identifier :class:`UnknownDialectError` is raised and the
    previous selection is left in place.
    """
    global _active
    dialect = get_dialect(name)
    with _lock:
        _active = dialect
    logger.debug("Active dialect set to %s", dialect.name.value)
    return dialect


def reset_active_dialect() -> None:
    """Drop the active selection so the default is rebuilt.  **For testing only.**"""
    global _active
    with _lock:
        _active = None
