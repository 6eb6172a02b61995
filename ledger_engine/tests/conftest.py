"""Shared fixtures for ledger engine tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import Engine

from ledger_engine.dialects import reset_active_dialect
from ledger_engine.state import get_engine

_LEDGER_ENV_VARS = (
    "LEDGER_ENV",
    "LEDGER_DEBUG",
    "LEDGER_DIALECT",
    "LEDGER_TABLE_NAME",
    "LEDGER_DATABASE_URL",
    "LEDGER_STRUCTURED_LOGGING",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear LEDGER_* variables and the active dialect around every test."""
    for var in _LEDGER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_active_dialect()
    yield
    reset_active_dialect()


@pytest.fixture()
def sqlite_engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine; one shared connection per thread."""
    engine = get_engine("sqlite://")
    yield engine
    engine.dispose()
