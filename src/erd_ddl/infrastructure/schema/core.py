"""Core schema model types for the DDL compiler.

The model mirrors what the ERD editor keeps per project: ordered tables with
ordered columns, and relationships whose two endpoints each point at a table
and a list of its columns. Every type is frozen so a snapshot handed to the
compiler cannot be mutated by it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class ColumnOption:
    """Constraint flags carried by a column."""

    not_null: bool = False
    auto_increment: bool = False
    primary_key: bool = False
    unique: bool = False


@dataclass(frozen=True)
class Column:
    """Definition of a single column in a table."""

    id: str
    name: str
    data_type: str = ""
    comment: str = ""
    default: str = ""
    option: ColumnOption = field(default_factory=ColumnOption)


@dataclass(frozen=True)
class Table:
    """A table with its columns in declaration order."""

    id: str
    name: str
    columns: Tuple[Column, ...] = ()
    comment: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))

    @property
    def has_primary_key(self) -> bool:
        return any(column.option.primary_key for column in self.columns)

    def primary_key_columns(self) -> List[Column]:
        return [column for column in self.columns if column.option.primary_key]

    def unique_columns(self) -> List[Column]:
        return [column for column in self.columns if column.option.unique]


@dataclass(frozen=True)
class RelationshipEndpoint:
    """One side of a relationship: a table and an ordered list of its columns."""

    table_id: str
    column_ids: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "column_ids", tuple(self.column_ids))


@dataclass(frozen=True)
class Relationship:
    """A foreign-key relationship.

    ``start`` is the referenced (parent) side, ``end`` is the side holding the
    foreign key columns. ``start.column_ids[i]`` pairs with ``end.column_ids[i]``.
    """

    id: str
    start: RelationshipEndpoint
    end: RelationshipEndpoint


@dataclass(frozen=True)
class SchemaSnapshot:
    """Complete input of one compile call."""

    database_name: str
    tables: Tuple[Table, ...] = ()
    relationships: Tuple[Relationship, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tables", tuple(self.tables))
        object.__setattr__(self, "relationships", tuple(self.relationships))


class SchemaIndex:
    """Read-only id lookup over a table list.

    When ids repeat, the first table (and within it the first column) in
    declaration order wins, which matches a front-to-back linear search.
    """

    def __init__(self, tables: Iterable[Table]):
        self._tables: Dict[str, Table] = {}
        self._columns: Dict[str, Dict[str, Column]] = {}
        for table in tables:
            if table.id in self._tables:
                continue
            self._tables[table.id] = table
            columns: Dict[str, Column] = {}
            for column in table.columns:
                columns.setdefault(column.id, column)
            self._columns[table.id] = columns

    def table(self, table_id: str) -> Optional[Table]:
        return self._tables.get(table_id)

    def column(self, table: Table, column_id: str) -> Optional[Column]:
        return self._columns.get(table.id, {}).get(column_id)

    def __len__(self) -> int:
        return len(self._tables)


__all__ = [
    "ColumnOption",
    "Column",
    "Table",
    "RelationshipEndpoint",
    "Relationship",
    "SchemaSnapshot",
    "SchemaIndex",
]
