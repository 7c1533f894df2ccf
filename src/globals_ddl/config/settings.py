"""
Configuration management for globals-ddl.

This module provides environment-based configuration using Pydantic BaseSettings,
so the catalog defaults baked into the generated DDL (system tablespace, reserved
resource queue, default queue priority) and the logging knobs can be overridden
per deployment without touching code.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from globals_ddl.infrastructure.constants import (
    DEFAULT_PRIORITY,
    DEFAULT_RESOURCE_QUEUE,
    DEFAULT_TABLESPACE,
    PRIORITY_LEVELS,
)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("GLOBALS_DDL_ENV_FILE")
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

    Environment variables are automatically loaded with the GLOBALS_DDL_ prefix.
    For example, GLOBALS_DDL_DEFAULT_TABLESPACE overrides default_tablespace.

    Logging fields (no prefix, uppercase names):
    - LOG_LEVEL: Logging level (uppercase)
    - LOG_TO_FILE: Enable the rotating file handler
    - LOG_FILE_DIR: Directory for log files
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        validation_alias="LOG_TO_FILE",
        description="Also write log records to a daily rotating file",
    )
    LOG_FILE_DIR: str = Field(
        default="logs",
        validation_alias="LOG_FILE_DIR",
        description="Directory for log files",
    )

    # Catalog defaults that decide which clauses are omitted from the output
    default_tablespace: str = Field(
        default=DEFAULT_TABLESPACE,
        description="System default tablespace; CREATE DATABASE omits it",
    )
    default_resource_queue: str = Field(
        default=DEFAULT_RESOURCE_QUEUE,
        description="Reserved resource queue that is ALTERed instead of CREATEd",
    )
    default_priority: str = Field(
        default=DEFAULT_PRIORITY,
        description="Resource queue priority omitted from the WITH clause",
    )

    model_config = SettingsConfigDict(
        env_prefix="GLOBALS_DDL_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("default_priority")
    @classmethod
    def _validate_priority(cls, value: str) -> str:
        lowered = value.lower()
        if lowered not in PRIORITY_LEVELS:
            raise ValueError(
                f"default_priority must be one of {list(PRIORITY_LEVELS)}, got {value!r}"
            )
        return lowered


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded once and reused across
    the application lifecycle. Tests that monkeypatch the environment should
    call ``get_settings.cache_clear()`` first.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
