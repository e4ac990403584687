"""Project document readers."""

from .document_reader import (
    SchemaDocumentError,
    load_schema_document,
    parse_schema_document,
)

__all__ = [
    "SchemaDocumentError",
    "load_schema_document",
    "parse_schema_document",
]
