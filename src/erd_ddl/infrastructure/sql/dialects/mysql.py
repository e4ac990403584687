"""
MySQL-specific DDL dialect implementation.

Provides MySQL syntax for schema setup, CREATE TABLE bodies, UNIQUE and
FOREIGN KEY constraints, and identifier quoting.
"""

from typing import List, Sequence

from ..core.identifier import quote_identifier, quote_string_literal


class MySQLDialect:
    """
    MySQL DDL dialect implementation.

    Table and column comments are emitted as SQL string literals, so a single
    quote inside a comment is doubled: ``it's`` becomes ``'it''s'``. This
    differs from the ERD editor's own export, which wrote comments between
    quotes unchanged. Comments without quotes are emitted identically.
    """

    name = "mysql"

    def __init__(self, quote_identifiers: bool = False):
        """
        Initialize the dialect.

        Args:
            quote_identifiers: Wrap every identifier in backticks. Off by
                default, so names are emitted exactly as entered.
        """
        self.quote_identifiers = quote_identifiers

    def quote(self, identifier: str) -> str:
        """Quote an identifier using MySQL syntax (backticks) when enabled."""
        if not self.quote_identifiers:
            return identifier
        return quote_identifier(identifier, dialect=self.name)

    def string_literal(self, text: str) -> str:
        return quote_string_literal(text)

    def drop_schema(self, database: str) -> str:
        return f"DROP SCHEMA IF EXISTS {self.quote(database)};"

    def create_schema(self, database: str) -> str:
        return f"CREATE SCHEMA {self.quote(database)} DEFAULT CHARACTER SET utf8;"

    def use_schema(self, database: str) -> str:
        return f"USE {self.quote(database)};"

    def create_table(self, table: str) -> str:
        return f"CREATE TABLE {self.quote(table)}"

    def nullability(self, not_null: bool) -> str:
        # NULL is padded to the width of NOT NULL so the next token lines up
        return "NOT NULL" if not_null else "NULL    "

    def auto_increment(self) -> str:
        return "AUTO_INCREMENT"

    def default(self, value: str) -> str:
        return f"DEFAULT {value}"

    def column_comment(self, comment: str) -> str:
        return f"COMMENT {self.string_literal(comment)}"

    def primary_key(self, columns: Sequence[str]) -> str:
        names = ", ".join(self.quote(c) for c in columns)
        return f"PRIMARY KEY ({names})"

    def close_table(self, comment: str) -> str:
        if comment.strip() == "":
            return ");"
        return f") COMMENT {self.string_literal(comment)};"

    def unique_constraint(self, table: str, column: str) -> List[str]:
        """
        Build an ALTER TABLE statement adding a single-column UNIQUE constraint.

        Returns:
            Statement lines, e.g. ``ALTER TABLE users`` and
            ``  ADD CONSTRAINT UQ_email UNIQUE (email);``
        """
        return [
            f"ALTER TABLE {self.quote(table)}",
            f"  ADD CONSTRAINT {self.quote(f'UQ_{column}')} UNIQUE ({self.quote(column)});",
        ]

    def foreign_key(
        self,
        constraint_name: str,
        table: str,
        columns: Sequence[str],
        ref_table: str,
        ref_columns: Sequence[str],
    ) -> List[str]:
        """
        Build an ALTER TABLE ... ADD CONSTRAINT ... FOREIGN KEY statement.

        Args:
            constraint_name: Final (collision-free) constraint name
            table: Table holding the foreign key columns
            columns: Foreign key columns on ``table``
            ref_table: Referenced table
            ref_columns: Referenced columns on ``ref_table``

        Returns:
            The four statement lines
        """
        fk_cols = ", ".join(self.quote(c) for c in columns)
        ref_cols = ", ".join(self.quote(c) for c in ref_columns)
        return [
            f"ALTER TABLE {self.quote(table)}",
            f"  ADD CONSTRAINT {self.quote(constraint_name)}",
            f"    FOREIGN KEY ({fk_cols})",
            f"    REFERENCES {self.quote(ref_table)} ({ref_cols});",
        ]
