"""Dialect protocol definition.

This is the contract every backend implementation must satisfy.  Runner
code depends on this protocol, never on a concrete dialect class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sqlalchemy.engine import Connection, CursorResult

from ._types import DialectName, PlaceholderStyle


@runtime_checkable
class SqlDialect(Protocol):
    """Backend-specific SQL for the migration version table."""

    @property
    def name(self) -> DialectName:
        """Identifier this dialect is registered under."""
        ...

    @property
    def table_name(self) -> str:
        """Version table every statement refers to."""
        ...

    @property
    def placeholder_style(self) -> PlaceholderStyle:
        """Placeholder convention used by :meth:`insert_version_sql`."""
        ...

    def create_version_table_sql(self) -> str:
        """Return the DDL that creates the version table.

        The statement declares ``id``, ``version_id``, ``is_applied`` and
        ``tstamp`` using the backend's own auto-increment and default
        timestamp syntax.
        """
        ...

    def insert_version_sql(self) -> str:
        """Return the INSERT template for one version event.

        Exactly two positional parameters, ``version_id`` then
        ``is_applied``, in the backend's placeholder style.
        """
        ...

    def version_query_sql(self) -> str:
        """Return ``SELECT version_id, is_applied ... ORDER BY id DESC``."""
        ...

    def aux_statements(self) -> list[tuple[str, str]]:
        """Return the ordered ``(step, sql)`` pairs run by :meth:`db_run_aux`.

        Empty for backends with native auto-increment.
        """
        ...

    def bind_applied(self, flag: bool) -> object:
        """Return the ``is_applied`` parameter value for *flag*."""
        ...

    def db_version_query(self, conn: Connection) -> CursorResult:
        """Execute the version query on *conn* and return the open cursor.

        Rows are ``(version_id, is_applied)``, most recent first.  Driver
        errors propagate unchanged.
        """
        ...

    def db_insert_version(self, conn: Connection, version_id: int, applied: bool) -> None:
        """Append one event row on *conn*.

        Parameters are bound by name, so the statement runs on any DBAPI
        driver regardless of its paramstyle.  :meth:`insert_version_sql`
        remains the backend-native text.
        """
        ...

    def db_run_aux(self, conn: Connection) -> None:
        """Run one-time setup that must follow table creation.

        Executes inside the caller's open transaction and never commits
        or rolls it back.

        Raises:
            AuxiliarySetupError: If any step fails.  Later steps are not
                attempted.
        """
        ...
