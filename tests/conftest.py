"""Shared pytest fixtures: settings isolation and sample schema snapshots."""

from __future__ import annotations

import os

import pytest

from erd_ddl.config.settings import get_settings
from erd_ddl.infrastructure.schema import SchemaSnapshot, Table
from tests.fixtures.schema_factory import make_column, make_relationship, make_table

SETTINGS_ENV_VARS = (
    "ERD_DDL_LOG_LEVEL",
    "ERD_DDL_LOG_TO_FILE",
    "ERD_DDL_LOG_FILE_DIR",
    "ERD_DDL_DIALECT",
    "ERD_DDL_STRICT_REFERENCES",
    "ERD_DDL_QUOTE_IDENTIFIERS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings, ignoring the caller's env."""
    for name in SETTINGS_ENV_VARS:
        if name in os.environ:
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def users_table() -> Table:
    return make_table(
        "users",
        make_column("id", "INT", not_null=True, auto_increment=True, primary_key=True),
        make_column("name", "VARCHAR(50)", not_null=True),
    )


@pytest.fixture
def shop_schema(users_table: Table) -> SchemaSnapshot:
    """users / orders with one foreign key, a unique email and a table comment."""
    users = make_table(
        "users",
        *users_table.columns,
        make_column("email", "VARCHAR(255)", unique=True, comment="login"),
        table_id=users_table.id,
    )
    orders = make_table(
        "orders",
        make_column("id", "BIGINT", not_null=True, primary_key=True, auto_increment=True),
        make_column("user_id", "INT", not_null=True),
        make_column("status", "VARCHAR(20)", default="'new'"),
        comment="customer orders",
    )
    return SchemaSnapshot(
        database_name="shop",
        tables=(users, orders),
        relationships=(make_relationship("rel-1", users, ["id"], orders, ["user_id"]),),
    )
