"""Ledger engine configuration loaded from environment variables."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Self

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ledger_engine.dialects import DialectName, dialect_for_url
from ledger_engine.naming import DEFAULT_TABLE_NAME, validate_table_name

logger = logging.getLogger(__name__)


class PlatformEnv(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with LEDGER_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    env: PlatformEnv = PlatformEnv.DEV
    debug: bool = False

    # Version table.  The dialect defaults to the backend of database_url.
    dialect: DialectName | None = None
    table_name: str = DEFAULT_TABLE_NAME

    # Database
    database_url: str = "sqlite:///.ledger/state.db"

    # Telemetry
    structured_logging: bool = False

    @field_validator("table_name")
    @classmethod
    def check_table_name(cls, v: str) -> str:
        return validate_table_name(v)

    @model_validator(mode="after")
    def _default_dialect_from_url(self) -> Self:
        if self.dialect is None:
            self.dialect = dialect_for_url(self.database_url)
        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info(
            "Loaded settings for environment: %s (dialect=%s)",
            settings.env.value,
            settings.dialect.value,
        )

    return settings
