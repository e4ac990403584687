"""
Unit tests for the MySQL DDL dialect and dialect lookup.
"""

import pytest

from erd_ddl.infrastructure.sql.dialects import (
    MySQLDialect,
    available_dialects,
    get_dialect,
)


class TestMySQLDialect:
    """Tests for MySQL dialect."""

    @pytest.fixture
    def dialect(self):
        return MySQLDialect()

    @pytest.fixture
    def quoting_dialect(self):
        return MySQLDialect(quote_identifiers=True)

    def test_dialect_name(self, dialect):
        assert dialect.name == "mysql"

    def test_identifiers_are_bare_by_default(self, dialect):
        assert dialect.quote("users") == "users"

    def test_quote_identifier_when_enabled(self, quoting_dialect):
        assert quoting_dialect.quote("users") == "`users`"

    def test_schema_preamble(self, dialect):
        assert dialect.drop_schema("shop") == "DROP SCHEMA IF EXISTS shop;"
        assert dialect.create_schema("shop") == (
            "CREATE SCHEMA shop DEFAULT CHARACTER SET utf8;"
        )
        assert dialect.use_schema("shop") == "USE shop;"

    def test_nullability_tokens_have_equal_width(self, dialect):
        assert dialect.nullability(True) == "NOT NULL"
        assert dialect.nullability(False) == "NULL    "
        assert len(dialect.nullability(True)) == len(dialect.nullability(False))

    def test_column_clauses(self, dialect):
        assert dialect.auto_increment() == "AUTO_INCREMENT"
        assert dialect.default("CURRENT_TIMESTAMP") == "DEFAULT CURRENT_TIMESTAMP"
        assert dialect.column_comment("login name") == "COMMENT 'login name'"

    def test_comment_quotes_are_doubled(self, dialect):
        assert dialect.column_comment("user's login") == "COMMENT 'user''s login'"
        assert dialect.column_comment("plain") == "COMMENT 'plain'"

    def test_primary_key(self, dialect, quoting_dialect):
        assert dialect.primary_key(["a", "b"]) == "PRIMARY KEY (a, b)"
        assert quoting_dialect.primary_key(["a"]) == "PRIMARY KEY (`a`)"

    def test_close_table(self, dialect):
        assert dialect.close_table("") == ");"
        assert dialect.close_table(" \t") == ");"
        assert dialect.close_table("it's big") == ") COMMENT 'it''s big';"

    def test_unique_constraint(self, dialect):
        assert dialect.unique_constraint("users", "email") == [
            "ALTER TABLE users",
            "  ADD CONSTRAINT UQ_email UNIQUE (email);",
        ]

    def test_unique_constraint_quoted(self, quoting_dialect):
        assert quoting_dialect.unique_constraint("users", "email")[1] == (
            "  ADD CONSTRAINT `UQ_email` UNIQUE (`email`);"
        )

    def test_foreign_key(self, dialect):
        assert dialect.foreign_key(
            "FK_users_TO_orders", "orders", ["user_id"], "users", ["id"]
        ) == [
            "ALTER TABLE orders",
            "  ADD CONSTRAINT FK_users_TO_orders",
            "    FOREIGN KEY (user_id)",
            "    REFERENCES users (id);",
        ]


class TestGetDialect:
    """Tests for dialect lookup by name."""

    def test_available(self):
        assert available_dialects() == ["mysql"]

    def test_lookup_is_case_insensitive(self):
        assert isinstance(get_dialect("MySQL"), MySQLDialect)

    def test_options_are_forwarded(self):
        assert get_dialect("mysql", quote_identifiers=True).quote("a") == "`a`"

    def test_unknown_dialect(self):
        with pytest.raises(ValueError, match="Unknown DDL dialect"):
            get_dialect("oracle")
