"""Schema model and the schema-to-DDL compiler."""

from .core import (
    Column,
    ColumnOption,
    Relationship,
    RelationshipEndpoint,
    SchemaIndex,
    SchemaSnapshot,
    Table,
)
from .ddl_generator import (
    ColumnWidths,
    DDLCompiler,
    compile_ddl,
    format_column,
    format_relationship,
    format_table,
    format_unique_constraints,
)
from .errors import UnresolvedReferenceError
from .naming import GeneratedName, NameRegistry

__all__ = [
    "ColumnOption",
    "Column",
    "Table",
    "RelationshipEndpoint",
    "Relationship",
    "SchemaSnapshot",
    "SchemaIndex",
    "GeneratedName",
    "NameRegistry",
    "ColumnWidths",
    "format_column",
    "format_table",
    "format_unique_constraints",
    "format_relationship",
    "DDLCompiler",
    "compile_ddl",
    "UnresolvedReferenceError",
]
