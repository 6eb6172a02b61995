"""Shared fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from ledger_engine.dialects import reset_active_dialect


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Keep LEDGER_* settings and any .env file out of CLI tests."""
    for var in ("LEDGER_DIALECT", "LEDGER_TABLE_NAME", "LEDGER_DATABASE_URL", "LEDGER_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_active_dialect()
    yield
    reset_active_dialect()
