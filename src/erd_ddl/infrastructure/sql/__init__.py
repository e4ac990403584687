"""
SQL module for dialect-specific DDL tokens.

This module provides identifier quoting and the dialect objects that supply
every literal keyword the DDL formatters emit.
"""

from .core.identifier import quote_identifier, quote_string_literal
from .dialects import DDLDialect, MySQLDialect, available_dialects, get_dialect

__all__ = [
    "quote_identifier",
    "quote_string_literal",
    "DDLDialect",
    "MySQLDialect",
    "available_dialects",
    "get_dialect",
]
