"""
DDL dialect protocol.

The table, column and relationship formatters only decide layout (order,
alignment, commas). Every literal token they emit comes from a dialect
implementing this protocol.
"""

from typing import List, Protocol, Sequence


class DDLDialect(Protocol):
    """Protocol for SQL DDL dialects."""

    name: str

    def quote(self, identifier: str) -> str: ...
    def string_literal(self, text: str) -> str: ...
    def drop_schema(self, database: str) -> str: ...
    def create_schema(self, database: str) -> str: ...
    def use_schema(self, database: str) -> str: ...
    def create_table(self, table: str) -> str: ...
    def nullability(self, not_null: bool) -> str: ...
    def auto_increment(self) -> str: ...
    def default(self, value: str) -> str: ...
    def column_comment(self, comment: str) -> str: ...
    def primary_key(self, columns: Sequence[str]) -> str: ...
    def close_table(self, comment: str) -> str: ...
    def unique_constraint(self, table: str, column: str) -> List[str]: ...
    def foreign_key(
        self,
        constraint_name: str,
        table: str,
        columns: Sequence[str],
        ref_table: str,
        ref_columns: Sequence[str],
    ) -> List[str]: ...
