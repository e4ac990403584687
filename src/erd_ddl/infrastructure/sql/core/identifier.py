"""
SQL identifier and literal handling utilities.

Provides functions for quoting identifiers (schema, table, column and
constraint names) and string literals used in COMMENT clauses.
"""


def quote_identifier(name: str, dialect: str = "mysql") -> str:
    """
    Quote a SQL identifier.

    Args:
        name: The identifier to quote
        dialect: Database dialect ("mysql", "ansi")

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("users")
        '`users`'
        >>> quote_identifier("order`s")
        '`order``s`'
        >>> quote_identifier("users", dialect="ansi")
        '"users"'
    """
    if dialect == "mysql":
        # Escape backticks in MySQL
        escaped = name.replace("`", "``")
        return f"`{escaped}`"
    else:
        # ANSI SQL uses double quotes
        escaped = name.replace('"', '""')
        return f'"{escaped}"'


def quote_string_literal(text: str) -> str:
    """
    Wrap text in single quotes, doubling embedded single quotes.

    Examples:
        >>> quote_string_literal("user table")
        "'user table'"
        >>> quote_string_literal("owner's id")
        "'owner''s id'"
    """
    escaped = text.replace("'", "''")
    return f"'{escaped}'"
