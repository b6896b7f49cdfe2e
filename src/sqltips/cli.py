"""Command-line interface for sqltips."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from sqltips.checks import CheckOptions
from sqltips.config import SQLTIPS_EXPECTED_SECTIONS
from sqltips.exceptions import DocumentAccessError, SqlTipsError
from sqltips.inspection import InspectionOptions, inspect_document, load_document
from sqltips.output_formatter import format_report
from sqltips.parser import parse_document
from sqltips.query_parser import parse_source_input
from sqltips.schemas import SourceKind
from sqltips.toc import render_toc, update_toc
from sqltips.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CHECK_FAILED = 1
EXIT_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="sqltips",
        description="Check and maintain the SQL tips document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sqltips check
  sqltips check README.md --expected-sections 12
  sqltips check https://github.com/owner/repo/blob/main/README.md --json
  sqltips toc README.md --write
  sqltips summary
        """,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: SQLTIPS_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to run",
        required=True,
    )

    source_help = "Markdown file path or http(s) URL (default: the bundled document)"

    check_parser = subparsers.add_parser(
        "check",
        help="Run anchor, prose, SQL and section-count checks",
    )
    check_parser.add_argument("source", nargs="?", help=source_help)
    count_group = check_parser.add_mutually_exclusive_group()
    count_group.add_argument(
        "--expected-sections",
        type=int,
        default=SQLTIPS_EXPECTED_SECTIONS,
        help=f"Number of tip sections required (default: {SQLTIPS_EXPECTED_SECTIONS})",
    )
    count_group.add_argument(
        "--no-count",
        action="store_true",
        help="Skip the section count check",
    )
    check_parser.add_argument(
        "--no-sql",
        action="store_true",
        help="Skip the SQL snippet sanity check",
    )
    check_parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always refetch remote documents",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )

    toc_parser = subparsers.add_parser(
        "toc",
        help="Print or rewrite the table of contents",
    )
    toc_parser.add_argument("source", nargs="?", help=source_help)
    toc_parser.add_argument(
        "--write",
        action="store_true",
        help="Rewrite the table of contents in place (local files only)",
    )
    toc_parser.add_argument(
        "--depth",
        type=int,
        default=1,
        help="Heading depth to include below tip sections (default: 1)",
    )

    summary_parser = subparsers.add_parser(
        "summary",
        help="Print the document summary and section tree",
    )
    summary_parser.add_argument("source", nargs="?", help=source_help)

    return parser


def run_check(args: argparse.Namespace) -> int:
    options = InspectionOptions(
        checks=CheckOptions(
            expected_sections=None if args.no_count else args.expected_sections,
            check_sql=not args.no_sql,
        ),
        use_cache=not args.no_cache,
    )
    result = asyncio.run(inspect_document(args.source, options=options))
    report = result.report

    if args.json:
        payload = {"source": result.source, "passed": report.passed, **report.model_dump(mode="json")}
        print(json.dumps(payload, indent=2))
    else:
        print(format_report(report))

    return EXIT_OK if report.passed else EXIT_CHECK_FAILED


def run_toc(args: argparse.Namespace) -> int:
    query = parse_source_input(args.source)
    if args.write and (query.kind != SourceKind.PATH or query.path is None):
        print("--write needs a local file path", file=sys.stderr)
        return EXIT_ERROR

    text = asyncio.run(load_document(query))

    if not args.write:
        print(render_toc(parse_document(text), depth=args.depth))
        return EXIT_OK

    updated = update_toc(text, depth=args.depth)
    if updated == text:
        print(f"{query.path}: table of contents is up to date")
        return EXIT_OK

    try:
        query.path.write_text(updated, encoding="utf-8")
    except OSError as exc:
        raise DocumentAccessError(f"Cannot write {query.path}: {exc}") from exc
    logger.info("Rewrote table of contents", extra={"path": str(query.path)})
    print(f"{query.path}: table of contents updated")
    return EXIT_OK


def run_summary(args: argparse.Namespace) -> int:
    result = asyncio.run(inspect_document(args.source))
    print(result.summary)
    print()
    print(result.sections_tree)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    commands = {
        "check": run_check,
        "toc": run_toc,
        "summary": run_summary,
    }

    try:
        return commands[args.command](args)
    except SqlTipsError as exc:
        logger.debug("Command failed", extra={"command": args.command, "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
