"""
Infrastructure Layer

Components:
- schema: schema snapshot model, constraint naming and the DDL compiler
- sql: identifier quoting and dialect implementations

Usage:
    from erd_ddl.infrastructure.schema import DDLCompiler, SchemaSnapshot
    from erd_ddl.infrastructure.sql import MySQLDialect
"""
