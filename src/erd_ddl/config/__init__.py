"""Configuration management for erd-ddl.

Usage:
    >>> from erd_ddl.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.dialect)
"""

from erd_ddl.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
