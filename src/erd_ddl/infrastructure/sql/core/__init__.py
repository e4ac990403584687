"""Core SQL utilities package."""

from .identifier import quote_identifier, quote_string_literal

__all__ = [
    "quote_identifier",
    "quote_string_literal",
]
