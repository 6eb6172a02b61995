"""Version ledger: the runner-facing view of the version table.

The ledger is constructed with an explicit dialect and never consults the
process-wide selection.  Every write appends a row; nothing is updated or
deleted.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, inspect

from ledger_engine.dialects import SqlDialect, VersionRow, ensure_compatible_backend
from ledger_engine.state.database import transaction

logger = logging.getLogger(__name__)

# Seed event written when the table is first created.
BASELINE_VERSION = 0


class VersionLedger:
    """Append-only record of migration apply/rollback events.

    Parameters
    ----------
    engine:
        Engine for the database whose migrations are tracked.
    dialect:
        Dialect matching *engine*'s backend.

    Raises
    ------
    DialectMismatchError
        If *dialect* cannot run on *engine*'s backend.
    """

    def __init__(self, engine: Engine, dialect: SqlDialect) -> None:
        ensure_compatible_backend(dialect.name, engine.dialect.name)
        self._engine = engine
        self._dialect = dialect

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def dialect(self) -> SqlDialect:
        return self._dialect

    def has_version_table(self) -> bool:
        """Return ``True`` if the version table exists."""
        schema, _, table = self._dialect.table_name.rpartition(".")
        with self._engine.connect() as conn:
            return inspect(conn).has_table(table, schema=schema or None)

    def ensure_version_table(self) -> int:
        """Create the version table if needed and return the current version.

        Creation, auxiliary setup and the baseline row share one
        transaction: if any of them fails nothing is left behind on
        backends with transactional DDL.
        """
        if self.has_version_table():
            return self.current_version()

        logger.info(
            "Creating version table %s",
            self._dialect.table_name,
            extra={"dialect": self._dialect.name.value},
        )
        with transaction(self._engine) as conn:
            conn.exec_driver_sql(self._dialect.create_version_table_sql())
            self._dialect.db_run_aux(conn)
            self._dialect.db_insert_version(conn, BASELINE_VERSION, applied=True)
        return BASELINE_VERSION

    def record(self, version_id: int, applied: bool) -> None:
        """Append an apply (``applied=True``) or rollback event."""
        with transaction(self._engine) as conn:
            self._dialect.db_insert_version(conn, version_id, applied)
        logger.info("Recorded version %d as %s", version_id, "applied" if applied else "rolled back")

    def history(self) -> list[VersionRow]:
        """Return every event, most recent first."""
        with self._engine.connect() as conn:
            result = self._dialect.db_version_query(conn)
            return [VersionRow.from_row(row) for row in result]

    def current_version(self) -> int:
        """Return the newest version whose latest event is an apply.

        Walks events newest first.  A rollback hides every older event for
        the same version, so a version that was applied and then rolled
        back does not count.  Returns ``0`` when nothing is applied.
        """
        rolled_back: set[int] = set()
        with self._engine.connect() as conn:
            for row in self._dialect.db_version_query(conn):
                event = VersionRow.from_row(row)
                if event.version_id in rolled_back:
                    continue
                if event.is_applied:
                    return event.version_id
                rolled_back.add(event.version_id)
        return BASELINE_VERSION
