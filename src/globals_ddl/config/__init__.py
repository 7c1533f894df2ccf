"""Configuration management for globals-ddl.

Usage:
    >>> from globals_ddl.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.default_tablespace)
"""

from globals_ddl.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
