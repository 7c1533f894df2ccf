"""
Unit tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from globals_ddl.config import Settings, get_settings
from globals_ddl.infrastructure.schema import Database, ResourceQueue, render


@pytest.mark.unit
def test_defaults() -> None:
    settings = Settings()
    assert settings.default_tablespace == "pg_default"
    assert settings.default_resource_queue == "pg_default"
    assert settings.default_priority == "medium"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_TO_FILE is False


@pytest.mark.unit
def test_prefixed_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLOBALS_DDL_DEFAULT_TABLESPACE", "gp_fast")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.default_tablespace == "gp_fast"
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.unit
def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.unit
def test_invalid_default_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLOBALS_DDL_DEFAULT_PRIORITY", "urgent")
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.unit
def test_default_priority_normalized() -> None:
    assert Settings(default_priority="HIGH").default_priority == "high"


@pytest.mark.unit
def test_environment_flows_into_rendering(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GLOBALS_DDL_DEFAULT_TABLESPACE", "gp_fast")
    monkeypatch.setenv("GLOBALS_DDL_DEFAULT_RESOURCE_QUEUE", "admin_queue")
    get_settings.cache_clear()

    output = render(
        [
            Database(1, "testdb", "gp_fast"),
            ResourceQueue(2, "admin_queue", 3, "-1.00", False, "0.00", "medium", "-1"),
        ]
    )
    assert output == (
        "CREATE DATABASE testdb;\n\n"
        "ALTER RESOURCE QUEUE admin_queue WITH (ACTIVE_STATEMENTS=3);\n"
    )
