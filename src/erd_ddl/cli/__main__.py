"""
Unified CLI entry point for erd-ddl.

Usage:
    python -m erd_ddl.cli <command> [options]

Available commands:
    compile      - Compile an ERD project document into a DDL script

Examples:
    python -m erd_ddl.cli compile project.json
    python -m erd_ddl.cli compile project.json --output schema.sql --strict
"""

import argparse
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="erd_ddl.cli",
        description="erd-ddl CLI - ERD project to SQL DDL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m erd_ddl.cli compile project.json
  python -m erd_ddl.cli compile project.json --output schema.sql --strict
        """,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    subparsers.add_parser(
        "compile",
        help="Compile a project document into DDL",
        description="Compile an ERD project document into a DDL script",
        add_help=False,  # Let the delegated module handle help
    )

    args, remaining_args = parser.parse_known_args(argv)

    if args.command == "compile":
        from erd_ddl.cli.compile_schema import main as compile_main

        return compile_main(remaining_args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
