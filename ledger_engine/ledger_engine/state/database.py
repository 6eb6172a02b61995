"""SQLAlchemy engine and transaction scope for the version ledger.

Engines are synchronous.  SQLite URLs get per-connection pragmas; every
other URL gets a pre-pinged pool.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import Connection, make_url

logger = logging.getLogger(__name__)


def get_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine for *database_url*.

    For file-backed SQLite URLs the parent directory is created first.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        engine = create_engine(url, echo=False)

        # pysqlite only opens a transaction before DML, so CREATE TABLE would
        # escape the rollback.  Take over BEGIN so DDL is transactional too.
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_conn: object, _: object) -> None:
            dbapi_conn.isolation_level = None  # type: ignore[attr-defined]
            cursor = dbapi_conn.cursor()  # type: ignore[attr-defined]
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(engine, "begin")
        def _begin(conn: Connection) -> None:
            conn.exec_driver_sql("BEGIN")

        logger.info("Created SQLite engine: %s", url.render_as_string(hide_password=True))
        return engine

    engine = create_engine(url, pool_pre_ping=True, pool_recycle=3600, echo=False)
    logger.info("Created engine for backend %s", url.get_backend_name())
    return engine


@contextmanager
def transaction(engine: Engine) -> Generator[Connection, None, None]:
    """Yield a connection inside a transaction.

    On successful exit the transaction is committed.  If an exception
    propagates it is rolled back before the error is re-raised.
    """
    with engine.connect() as conn:
        trans = conn.begin()
        try:
            yield conn
            trans.commit()
        except Exception:
            trans.rollback()
            logger.warning("Transaction rolled back")
            raise
