"""Pytest configuration shared by the globals-ddl test suite."""

from __future__ import annotations

import os
from typing import Generator

import pytest

from globals_ddl.config import get_settings

SETTINGS_ENV_VARS = ("LOG_LEVEL", "LOG_TO_FILE", "LOG_FILE_DIR")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Give every test settings built from defaults, not the caller's environment."""
    for key in list(os.environ):
        if key.upper().startswith("GLOBALS_DDL_") or key.upper() in SETTINGS_ENV_VARS:
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
