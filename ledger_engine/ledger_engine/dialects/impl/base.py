"""Behaviour shared by every concrete dialect.

Subclasses supply the DDL and, where the backend has no native
auto-increment, the ordered auxiliary statements.  Query execution and
the fail-fast auxiliary pipeline live here so that every backend runs
them identically.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass, field
from typing import ClassVar

from sqlalchemy import text
from sqlalchemy.engine import Connection, CursorResult
from sqlalchemy.exc import SQLAlchemyError

from ledger_engine.dialects._types import AuxiliarySetupError, DialectName, PlaceholderStyle
from ledger_engine.naming import validate_table_name, version_table_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaseDialect(abc.ABC):
    """Immutable dialect bound to one version table name.

    Subclasses must set :attr:`name` and :attr:`placeholder_style` and
    implement :meth:`create_version_table_sql`.
    """

    name: ClassVar[DialectName]
    placeholder_style: ClassVar[PlaceholderStyle]

    # Appended to generated DML.  Oracle drivers reject a trailing ";".
    statement_terminator: ClassVar[str] = ";"

    table_name: str = field(default_factory=version_table_name)

    def __post_init__(self) -> None:
        validate_table_name(self.table_name)

    # -- SQL text ----------------------------------------------------------

    @abc.abstractmethod
    def create_version_table_sql(self) -> str:
        """DDL creating the version table with this backend's column types."""

    def insert_version_sql(self) -> str:
        return self._insert_sql(self.placeholder_style.render(2))

    def _insert_sql(self, values: str) -> str:
        return (
            f"INSERT INTO {self.table_name} (version_id, is_applied) "
            f"VALUES ({values}){self.statement_terminator}"
        )

    def version_query_sql(self) -> str:
        return f"SELECT version_id, is_applied FROM {self.table_name} ORDER BY id DESC"

    def aux_statements(self) -> list[tuple[str, str]]:
        """Ordered ``(step, sql)`` pairs run by :meth:`db_run_aux`."""
        return []

    def bind_applied(self, flag: bool) -> object:
        """Parameter value stored in ``is_applied`` for *flag*."""
        return flag

    # -- Database access ---------------------------------------------------

    def db_version_query(self, conn: Connection) -> CursorResult:
        return conn.exec_driver_sql(self.version_query_sql())

    def db_insert_version(self, conn: Connection, version_id: int, applied: bool) -> None:
        # Named binds let SQLAlchemy render the driver's own paramstyle.
        stmt = text(self._insert_sql(":version_id, :is_applied"))
        conn.execute(stmt, {"version_id": version_id, "is_applied": self.bind_applied(applied)})

    def db_run_aux(self, conn: Connection) -> None:
        steps = self.aux_statements()
        if not steps:
            return

        for step, sql in steps:
            logger.debug("Running %s auxiliary step: %s", self.name.value, step)
            try:
                conn.exec_driver_sql(sql)
            except SQLAlchemyError as exc:
                raise AuxiliarySetupError(self.name, step, exc) from exc

        logger.info(
            "Auxiliary setup complete for %s (%d steps)",
            self.table_name,
            len(steps),
            extra={"dialect": self.name.value},
        )
