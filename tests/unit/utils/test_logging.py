"""Unit tests for structured logging framework.

Tests cover:
- get_logger returns a structlog BoundLogger
- JSON rendering with ISO timestamps and logger names
- Sanitization guards sensitive fields such as role passwords
- Context binding
- Precondition failures are logged before they propagate
"""

import json
import logging

import pytest

from globals_ddl.infrastructure.schema import (
    CatalogPreconditionError,
    Role,
    build_role,
)
from globals_ddl.utils.logging import (
    bind_context,
    get_logger,
    sanitize_for_logging,
)


def _last_event(caplog: pytest.LogCaptureFixture) -> dict:
    assert caplog.records
    return json.loads(caplog.records[-1].getMessage())


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "info")
    assert hasattr(logger, "error")


@pytest.mark.unit
def test_logger_name_and_timestamp(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("my_test_logger").info("test_event")

    log_data = _last_event(caplog)
    assert log_data["logger"] == "my_test_logger"
    assert log_data["event"] == "test_event"
    assert log_data["level"] == "info"
    assert "T" in log_data["timestamp"]


@pytest.mark.unit
def test_sanitize_for_logging_redacts_password() -> None:
    sanitized = sanitize_for_logging({"password": "md5abc", "role": "admin"})

    assert sanitized["password"] == "[REDACTED]"
    assert sanitized["role"] == "admin"


@pytest.mark.unit
def test_sanitize_nested_dict() -> None:
    sanitized = sanitize_for_logging({"role": {"name": "r", "role_password": "x"}})

    assert sanitized["role"]["role_password"] == "[REDACTED]"
    assert sanitized["role"]["name"] == "r"


@pytest.mark.unit
def test_processor_redacts_event_fields(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("sanitize_test").info("role_loaded", password="md5abc", api_token="t")

    log_data = _last_event(caplog)
    assert log_data["password"] == "[REDACTED]"
    assert log_data["api_token"] == "[REDACTED]"


@pytest.mark.unit
def test_bind_context(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    bind_context(kind="ROLE", oid=16384).info("object_seen")

    log_data = _last_event(caplog)
    assert log_data["kind"] == "ROLE"
    assert log_data["oid"] == 16384


@pytest.mark.unit
def test_precondition_violation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    with pytest.raises(CatalogPreconditionError):
        build_role(Role(42, ""))

    log_data = _last_event(caplog)
    assert log_data["event"] == "precondition_violation"
    assert log_data["kind"] == "ROLE"
    assert log_data["oid"] == 42
    assert log_data["field"] == "name"
    assert log_data["level"] == "error"
