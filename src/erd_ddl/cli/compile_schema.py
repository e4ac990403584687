"""
Schema compile CLI for erd-ddl.

Reads an ERD project document and writes the generated DDL script.

Usage:
    # Print DDL to stdout
    python -m erd_ddl.cli compile project.json

    # Write DDL to a file, failing on dangling relationship references
    python -m erd_ddl.cli compile project.json --output schema.sql --strict
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from erd_ddl.config import get_settings
from erd_ddl.infrastructure.schema import UnresolvedReferenceError, compile_ddl
from erd_ddl.infrastructure.sql.dialects import available_dialects, get_dialect
from erd_ddl.io.readers import SchemaDocumentError, load_schema_document
from erd_ddl.utils.logging import bind_context


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="erd_ddl.cli compile",
        description="Compile an ERD project document into a DDL script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print DDL to stdout
  python -m erd_ddl.cli compile project.json

  # Write to a file with backtick-quoted identifiers
  python -m erd_ddl.cli compile project.yaml -o schema.sql --quote-identifiers
        """,
    )
    parser.add_argument("document", help="Project document (.json, .yaml, .yml)")
    parser.add_argument(
        "--output",
        "-o",
        help="Write DDL to this file instead of stdout",
    )
    parser.add_argument(
        "--dialect",
        choices=available_dialects(),
        default=None,
        help="Target dialect (default: ERD_DDL_DIALECT or mysql)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when a relationship references a missing table or column",
    )
    parser.add_argument(
        "--quote-identifiers",
        action="store_true",
        default=None,
        help="Quote every identifier in the generated DDL",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point for compiling a project document.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for document, reference or output errors)
    """
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    dialect_name = args.dialect or settings.dialect
    quote = (
        args.quote_identifiers
        if args.quote_identifiers is not None
        else settings.quote_identifiers
    )
    strict = args.strict if args.strict is not None else settings.strict_references

    logger = bind_context(document=args.document, dialect=dialect_name)

    try:
        snapshot = load_schema_document(args.document)
        ddl = compile_ddl(
            snapshot,
            dialect=get_dialect(dialect_name, quote_identifiers=quote),
            strict=strict,
        )
    except (SchemaDocumentError, UnresolvedReferenceError) as e:
        logger.error("cli.compile.failed", error=str(e), error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(ddl, encoding="utf-8")
        except OSError as e:
            logger.error(
                "cli.compile.failed", error=str(e), error_type=type(e).__name__
            )
            print(f"Error: cannot write {output_path}: {e}", file=sys.stderr)
            return 1
        logger.info("cli.compile.written", output=str(output_path), size=len(ddl))
    else:
        sys.stdout.write(ddl)

    return 0


if __name__ == "__main__":
    sys.exit(main())
