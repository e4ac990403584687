"""DDL dialect implementations and lookup by name."""

from typing import Any, Callable, Dict, List

from .base import DDLDialect
from .mysql import MySQLDialect

_DIALECTS: Dict[str, Callable[..., DDLDialect]] = {
    MySQLDialect.name: MySQLDialect,
}


def available_dialects() -> List[str]:
    return sorted(_DIALECTS)


def get_dialect(name: str, **options: Any) -> DDLDialect:
    """
    Create a dialect instance by name.

    Args:
        name: Dialect name, case-insensitive (e.g. "mysql")
        **options: Keyword options passed to the dialect constructor

    Raises:
        ValueError: If no dialect is registered under ``name``
    """
    factory = _DIALECTS.get(name.lower())
    if factory is None:
        raise ValueError(
            f"Unknown DDL dialect: {name!r}. "
            f"Available dialects: {', '.join(available_dialects())}"
        )
    return factory(**options)


__all__ = ["DDLDialect", "MySQLDialect", "available_dialects", "get_dialect"]
