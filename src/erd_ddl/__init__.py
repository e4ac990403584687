"""
erd-ddl - Schema-to-DDL compiler for entity-relationship diagram projects.

Turns an in-memory relational schema snapshot (tables, columns and
relationships drawn in the ERD editor) into a runnable SQL script.
"""

__version__ = "0.1.0"
