"""
Project document reading for erd-ddl.

The ERD editor saves a project as one JSON document holding the canvas
settings, the table store and the relationship store. This module validates
such a document (JSON or YAML) with Pydantic and turns it into an immutable
SchemaSnapshot for the compiler.
"""

import json
from pathlib import Path
from typing import Any, List, Mapping, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from erd_ddl.infrastructure.schema.core import (
    Column,
    ColumnOption,
    Relationship,
    RelationshipEndpoint,
    SchemaSnapshot,
    Table,
)
from erd_ddl.utils.logging import get_logger

logger = get_logger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class SchemaDocumentError(Exception):
    """Raised when a project document cannot be read or validated."""

    pass


def _text_or_empty(value: Any) -> Any:
    """Read YAML nulls as empty text and booleans as SQL keywords."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class _DocumentModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", coerce_numbers_to_str=True
    )


class ColumnOptionDocument(_DocumentModel):
    """Schema for a column's option flags."""

    not_null: bool = Field(False, alias="notNull")
    auto_increment: bool = Field(False, alias="autoIncrement")
    primary_key: bool = Field(False, alias="primaryKey")
    unique: bool = Field(False, alias="unique")


class ColumnDocument(_DocumentModel):
    """Schema for a single column."""

    id: str = Field(..., description="Column identifier")
    name: str = Field("", description="Column name")
    data_type: str = Field("", alias="dataType", description="SQL data type")
    comment: str = Field("", description="Free-text comment")
    default: str = Field("", description="Default value expression")
    option: ColumnOptionDocument = Field(default_factory=ColumnOptionDocument)

    @field_validator("name", "data_type", "comment", "default", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _text_or_empty(v)


class TableDocument(_DocumentModel):
    """Schema for a single table."""

    id: str = Field(..., description="Table identifier")
    name: str = Field("", description="Table name")
    comment: str = Field("", description="Free-text comment")
    columns: List[ColumnDocument] = Field(default_factory=list)

    @field_validator("name", "comment", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _text_or_empty(v)


class EndpointDocument(_DocumentModel):
    """Schema for one side of a relationship."""

    table_id: str = Field(..., alias="tableId")
    column_ids: List[str] = Field(default_factory=list, alias="columnIds")


class RelationshipDocument(_DocumentModel):
    """Schema for a relationship between two tables."""

    id: str = Field(..., description="Relationship identifier")
    start: EndpointDocument
    end: EndpointDocument


class CanvasDocument(_DocumentModel):
    database_name: str = Field("", alias="databaseName")

    @field_validator("database_name", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _text_or_empty(v)


class TableStoreDocument(_DocumentModel):
    tables: List[TableDocument] = Field(default_factory=list)


class RelationshipStoreDocument(_DocumentModel):
    relationships: List[RelationshipDocument] = Field(default_factory=list)


class ProjectDocument(_DocumentModel):
    """Schema for a complete ERD project document."""

    canvas: CanvasDocument = Field(default_factory=CanvasDocument)
    table: TableStoreDocument = Field(default_factory=TableStoreDocument)
    relationship: RelationshipStoreDocument = Field(
        default_factory=RelationshipStoreDocument
    )

    def to_snapshot(self) -> SchemaSnapshot:
        """Convert the validated document into a compiler snapshot."""
        tables = [
            Table(
                id=table.id,
                name=table.name,
                comment=table.comment,
                columns=tuple(
                    Column(
                        id=column.id,
                        name=column.name,
                        data_type=column.data_type,
                        comment=column.comment,
                        default=column.default,
                        option=ColumnOption(
                            not_null=column.option.not_null,
                            auto_increment=column.option.auto_increment,
                            primary_key=column.option.primary_key,
                            unique=column.option.unique,
                        ),
                    )
                    for column in table.columns
                ),
            )
            for table in self.table.tables
        ]
        relationships = [
            Relationship(
                id=relationship.id,
                start=RelationshipEndpoint(
                    table_id=relationship.start.table_id,
                    column_ids=tuple(relationship.start.column_ids),
                ),
                end=RelationshipEndpoint(
                    table_id=relationship.end.table_id,
                    column_ids=tuple(relationship.end.column_ids),
                ),
            )
            for relationship in self.relationship.relationships
        ]
        return SchemaSnapshot(
            database_name=self.canvas.database_name,
            tables=tuple(tables),
            relationships=tuple(relationships),
        )


def parse_schema_document(data: Mapping[str, Any]) -> SchemaSnapshot:
    """
    Validate an in-memory project document and build a snapshot.

    Args:
        data: Decoded project document

    Returns:
        SchemaSnapshot built from the document

    Raises:
        SchemaDocumentError: If the document does not match the expected shape
    """
    if not isinstance(data, Mapping):
        raise SchemaDocumentError(
            f"Project document must be a mapping, got {type(data).__name__}"
        )
    try:
        document = ProjectDocument.model_validate(dict(data))
    except ValidationError as e:
        raise SchemaDocumentError(f"Project document validation failed: {e}") from e
    return document.to_snapshot()


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaDocumentError(f"Invalid JSON in project document: {e}") from e
    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SchemaDocumentError(f"Invalid YAML in project document: {e}") from e

    raise SchemaDocumentError(
        f"Unsupported project document type {suffix or '(none)'!r}; "
        f"expected one of: {', '.join(JSON_SUFFIXES + YAML_SUFFIXES)}"
    )


def load_schema_document(path: Union[str, Path]) -> SchemaSnapshot:
    """
    Read a project document from disk.

    Args:
        path: Path to a .json, .yaml or .yml document

    Returns:
        SchemaSnapshot built from the document

    Raises:
        SchemaDocumentError: If the file is missing, unreadable or invalid
    """
    document_path = Path(path)
    if not document_path.is_file():
        raise SchemaDocumentError(f"Project document not found: {document_path}")

    try:
        raw = _read_raw(document_path)
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaDocumentError(f"Failed to read project document: {e}") from e

    snapshot = parse_schema_document(raw)
    logger.info(
        "document.loaded",
        path=str(document_path),
        database=snapshot.database_name,
        table_count=len(snapshot.tables),
        relationship_count=len(snapshot.relationships),
    )
    return snapshot
