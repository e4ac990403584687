"""DDL SQL generation for ERD schema snapshots.

The compiler walks a snapshot in declaration order and emits, line by line:
the schema preamble, one CREATE TABLE block per table followed by its UNIQUE
constraints, then one FOREIGN KEY block per relationship. Layout decisions
(ordering, alignment, commas) live here; literal tokens come from the dialect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from erd_ddl.config import get_settings
from erd_ddl.infrastructure.sql.dialects import DDLDialect, MySQLDialect, get_dialect
from erd_ddl.utils.logging import get_logger

from .core import Column, Relationship, SchemaIndex, SchemaSnapshot, Table
from .errors import UnresolvedReferenceError
from .naming import NameRegistry

logger = get_logger(__name__)


def _is_blank(value: str) -> bool:
    return value.strip() == ""


@dataclass(frozen=True)
class ColumnWidths:
    """Longest column name and data type within one table."""

    name: int
    data_type: int

    @classmethod
    def measure(cls, columns: Iterable[Column], dialect: DDLDialect) -> "ColumnWidths":
        name = 0
        data_type = 0
        for column in columns:
            name = max(name, len(dialect.quote(column.name)))
            data_type = max(data_type, len(column.data_type))
        return cls(name=name, data_type=data_type)


def format_column(
    column: Column, is_comma: bool, widths: ColumnWidths, dialect: DDLDialect
) -> str:
    """Render one aligned column definition line."""
    parts: List[str] = [
        "  " + dialect.quote(column.name).ljust(widths.name),
        column.data_type.ljust(widths.data_type),
        dialect.nullability(column.option.not_null),
    ]
    if column.option.auto_increment:
        parts.append(dialect.auto_increment())
    elif not _is_blank(column.default):
        parts.append(dialect.default(column.default))
    if not _is_blank(column.comment):
        parts.append(dialect.column_comment(column.comment))

    return " ".join(parts) + ("," if is_comma else "")


def format_table(table: Table, dialect: DDLDialect) -> List[str]:
    """
    Render the CREATE TABLE block of one table.

    When the table has a primary key, every column line takes a trailing comma
    because the PRIMARY KEY clause follows; otherwise the last column has none.
    """
    lines: List[str] = [dialect.create_table(table.name), "("]
    has_pk = table.has_primary_key
    widths = ColumnWidths.measure(table.columns, dialect)

    last = len(table.columns) - 1
    for i, column in enumerate(table.columns):
        lines.append(format_column(column, has_pk or i != last, widths, dialect))

    if has_pk:
        pk_names = [column.name for column in table.primary_key_columns()]
        lines.append(f"  {dialect.primary_key(pk_names)}")

    lines.append(dialect.close_table(table.comment))
    return lines


def format_unique_constraints(table: Table, dialect: DDLDialect) -> List[str]:
    """Render one UNIQUE constraint statement per unique column, each followed by a blank line."""
    lines: List[str] = []
    for column in table.unique_columns():
        lines.extend(dialect.unique_constraint(table.name, column.name))
        lines.append("")
    return lines


def _resolve_columns(
    index: SchemaIndex, table: Table, column_ids: Iterable[str]
) -> Tuple[List[str], List[str]]:
    names: List[str] = []
    missing: List[str] = []
    for column_id in column_ids:
        column = index.column(table, column_id)
        if column is None:
            missing.append(column_id)
        else:
            names.append(column.name)
    return names, missing


def format_relationship(
    index: SchemaIndex,
    relationship: Relationship,
    registry: NameRegistry,
    dialect: DDLDialect,
    strict: bool = False,
) -> List[str]:
    """
    Render one relationship as an ALTER TABLE ... FOREIGN KEY statement.

    Args:
        index: Table/column lookup for the snapshot being compiled
        relationship: Relationship to render
        registry: Name registry of the current run
        dialect: Dialect supplying the literal syntax
        strict: Raise instead of skipping or shortening unresolvable references

    Returns:
        Statement lines, or an empty list when an endpoint table is missing

    Raises:
        UnresolvedReferenceError: In strict mode, when a table or column id
            does not resolve
    """
    start_table = index.table(relationship.start.table_id)
    end_table = index.table(relationship.end.table_id)

    if start_table is None or end_table is None:
        missing_tables = [
            endpoint.table_id
            for endpoint in (relationship.start, relationship.end)
            if index.table(endpoint.table_id) is None
        ]
        if strict:
            raise UnresolvedReferenceError(
                relationship.id,
                missing_tables,
                f"Relationship {relationship.id!r} references missing table(s): "
                f"{', '.join(missing_tables)}",
            )
        logger.warning(
            "ddl.relationship.skipped",
            relationship_id=relationship.id,
            missing_table_ids=missing_tables,
        )
        return []

    fk_name = registry.reserve(f"FK_{start_table.name}_TO_{end_table.name}")

    end_columns, end_missing = _resolve_columns(
        index, end_table, relationship.end.column_ids
    )
    start_columns, start_missing = _resolve_columns(
        index, start_table, relationship.start.column_ids
    )

    missing_columns = end_missing + start_missing
    if missing_columns:
        if strict:
            raise UnresolvedReferenceError(
                relationship.id,
                missing_columns,
                f"Relationship {relationship.id!r} references missing column(s): "
                f"{', '.join(missing_columns)}",
            )
        # Known limitation: the key lists are emitted shortened and may no
        # longer pair up positionally.
        logger.warning(
            "ddl.relationship.columns_dropped",
            relationship_id=relationship.id,
            constraint=fk_name,
            missing_column_ids=missing_columns,
        )

    return dialect.foreign_key(
        fk_name, end_table.name, end_columns, start_table.name, start_columns
    )


class DDLCompiler:
    """
    Compile schema snapshots into DDL scripts.

    The compiler holds configuration only. Every ``compile`` call builds its
    own NameRegistry and SchemaIndex, so one instance may be shared between
    threads.

    Example:
        >>> compiler = DDLCompiler()
        >>> print(compiler.compile(SchemaSnapshot(database_name="shop")))
        DROP SCHEMA IF EXISTS shop;
        <BLANKLINE>
        CREATE SCHEMA shop DEFAULT CHARACTER SET utf8;
        USE shop;
        <BLANKLINE>
    """

    def __init__(self, dialect: Optional[DDLDialect] = None, strict: bool = False):
        self.dialect = dialect or MySQLDialect()
        self.strict = strict

    def compile(self, schema: SchemaSnapshot) -> str:
        """
        Compile one snapshot.

        Args:
            schema: Tables, relationships and database name to compile

        Returns:
            Newline-joined DDL script
        """
        registry = NameRegistry()
        index = SchemaIndex(schema.tables)
        dialect = self.dialect

        lines: List[str] = [
            dialect.drop_schema(schema.database_name),
            "",
            dialect.create_schema(schema.database_name),
            dialect.use_schema(schema.database_name),
            "",
        ]

        for table in schema.tables:
            lines.extend(format_table(table, dialect))
            lines.append("")
            lines.extend(format_unique_constraints(table, dialect))

        skipped = 0
        for relationship in schema.relationships:
            statement = format_relationship(
                index, relationship, registry, dialect, strict=self.strict
            )
            if not statement:
                skipped += 1
                continue
            lines.extend(statement)
            lines.append("")

        logger.info(
            "ddl.compile.completed",
            dialect=dialect.name,
            database=schema.database_name,
            table_count=len(schema.tables),
            relationship_count=len(schema.relationships),
            skipped_relationships=skipped,
            constraint_names=registry.names,
            line_count=len(lines),
        )
        return "\n".join(lines)


def compile_ddl(
    schema: SchemaSnapshot,
    dialect: Optional[DDLDialect] = None,
    strict: Optional[bool] = None,
) -> str:
    """
    Compile a snapshot, filling unspecified options from settings.

    Args:
        schema: Snapshot to compile
        dialect: Dialect to use (default: ``settings.dialect``)
        strict: Strict reference mode (default: ``settings.strict_references``)
    """
    if dialect is None or strict is None:
        settings = get_settings()
        if dialect is None:
            dialect = get_dialect(
                settings.dialect, quote_identifiers=settings.quote_identifiers
            )
        if strict is None:
            strict = settings.strict_references

    return DDLCompiler(dialect=dialect, strict=strict).compile(schema)


__all__ = [
    "ColumnWidths",
    "format_column",
    "format_table",
    "format_unique_constraints",
    "format_relationship",
    "DDLCompiler",
    "compile_ddl",
]
