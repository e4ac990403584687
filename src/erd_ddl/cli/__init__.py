"""Command-line interface for erd-ddl."""
