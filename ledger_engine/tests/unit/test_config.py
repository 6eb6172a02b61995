"""Unit tests for ledger_engine.config and the table name lookup."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ledger_engine.config import PlatformEnv, Settings, load_settings
from ledger_engine.dialects import DialectName
from ledger_engine.naming import DEFAULT_TABLE_NAME, validate_table_name, version_table_name

# ---------------------------------------------------------------------------
# Settings - default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_default_env(self):
        assert Settings().env == PlatformEnv.DEV

    def test_default_debug(self):
        assert Settings().debug is False

    def test_default_dialect_matches_default_url(self):
        assert Settings().dialect == DialectName.SQLITE3

    def test_default_table_name(self):
        assert Settings().table_name == DEFAULT_TABLE_NAME

    def test_default_database_url(self):
        assert Settings().database_url.startswith("sqlite:///")

    def test_default_structured_logging(self):
        assert Settings().structured_logging is False


# ---------------------------------------------------------------------------
# Environment variable overrides
# ---------------------------------------------------------------------------


class TestSettingsEnvOverrides:
    @pytest.mark.parametrize("name", ["postgres", "mysql", "sqlite3", "redshift", "tidb", "oracle"])
    def test_dialect_from_env(self, monkeypatch: pytest.MonkeyPatch, name: str):
        monkeypatch.setenv("LEDGER_DIALECT", name)
        assert Settings().dialect.value == name

    def test_unknown_dialect_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEDGER_DIALECT", "mssql")
        with pytest.raises(ValidationError):
            Settings()

    def test_dialect_derived_from_database_url(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEDGER_DATABASE_URL", "mysql+pymysql://ledger@db/app")
        assert Settings().dialect == DialectName.MYSQL

    def test_explicit_dialect_wins_over_url(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEDGER_DATABASE_URL", "mysql+pymysql://ledger@db/app")
        monkeypatch.setenv("LEDGER_DIALECT", "tidb")
        assert Settings().dialect == DialectName.TIDB

    def test_unsupported_url_backend_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEDGER_DATABASE_URL", "mssql+pyodbc://db/app")
        with pytest.raises(ValidationError, match="unknown dialect"):
            Settings()

    def test_table_name_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEDGER_TABLE_NAME", "app.versions")
        assert Settings().table_name == "app.versions"

    def test_invalid_table_name_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEDGER_TABLE_NAME", "versions; drop")
        with pytest.raises(ValidationError):
            Settings()

    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ledger_debug", "true")
        assert Settings().debug is True


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------


class TestLoadSettings:
    def test_overrides(self):
        settings = load_settings(dialect="oracle", table_name="ora_log")
        assert settings.dialect == DialectName.ORACLE
        assert settings.table_name == "ora_log"

    def test_debug_logs(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level("INFO", logger="ledger_engine.config"):
            load_settings(debug=True)
        assert "Loaded settings for environment: dev (dialect=sqlite3)" in caplog.text


# ---------------------------------------------------------------------------
# Table name resolution
# ---------------------------------------------------------------------------


class TestTableName:
    def test_version_table_name_default(self):
        assert version_table_name() == DEFAULT_TABLE_NAME

    def test_version_table_name_follows_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEDGER_TABLE_NAME", "goose_db_version")
        assert version_table_name() == "goose_db_version"

    @pytest.mark.parametrize("name", ["versions", "_v", "ops.versions", "v$log", "V2"])
    def test_valid(self, name: str):
        assert validate_table_name(name) == name

    def test_too_long(self):
        with pytest.raises(ValueError):
            validate_table_name("v" * 129)
