"""
Configuration management for erd-ddl.

This module provides environment-based configuration using Pydantic BaseSettings.
Values are read from ERD_DDL_* environment variables and an optional .env file.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from erd_ddl.infrastructure.sql.dialects import available_dialects

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("ERD_DDL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the ERD_DDL_ prefix.
    For example, ERD_DDL_STRICT_REFERENCES=true turns on strict mode.
    """

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Also write logs to a daily rotating file"
    )
    log_file_dir: str = Field(default="logs", description="Directory for log files")

    # Compiler
    dialect: str = Field(default="mysql", description="Target DDL dialect")
    strict_references: bool = Field(
        default=False,
        description="Fail on relationships referencing missing tables or columns",
    )
    quote_identifiers: bool = Field(
        default=False, description="Quote every identifier in the generated DDL"
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("dialect")
    @classmethod
    def _validate_dialect(cls, value: str) -> str:
        """Reject dialect names with no registered implementation."""
        name = value.lower()
        if name not in available_dialects():
            raise ValueError(
                f"Unsupported dialect {value!r}; "
                f"expected one of: {', '.join(available_dialects())}"
            )
        return name

    model_config = SettingsConfigDict(
        env_prefix="ERD_DDL_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
