"""sqltips: check and maintain a markdown document of SQL tips."""

from sqltips.checks import CheckOptions, run_checks
from sqltips.exceptions import (
    DocumentAccessError,
    DocumentNotFoundError,
    FetchError,
    InvalidSourceError,
    ParseError,
    SqlTipsError,
)
from sqltips.inspection import InspectionOptions, inspect_document, inspect_text, read_bundled_document
from sqltips.parser import parse_document
from sqltips.query_parser import parse_source_input
from sqltips.schemas import CheckReport, Document, InspectionResult, Issue
from sqltips.slugs import SlugRegistry, slugify
from sqltips.toc import render_toc, update_toc

__all__ = [
    "CheckOptions",
    "CheckReport",
    "Document",
    "DocumentAccessError",
    "DocumentNotFoundError",
    "FetchError",
    "InspectionOptions",
    "InspectionResult",
    "InvalidSourceError",
    "Issue",
    "ParseError",
    "SlugRegistry",
    "SqlTipsError",
    "inspect_document",
    "inspect_text",
    "parse_document",
    "parse_source_input",
    "read_bundled_document",
    "render_toc",
    "run_checks",
    "slugify",
    "update_toc",
]
