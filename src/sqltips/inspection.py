"""Inspection pipeline: load -> parse -> check -> format."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources

from sqltips.cache_utils import read_text_async
from sqltips.checks import CheckOptions, run_checks
from sqltips.exceptions import DocumentAccessError, DocumentNotFoundError, ParseError
from sqltips.fetch import fetch_document
from sqltips.output_formatter import format_document
from sqltips.parser import parse_document
from sqltips.query_parser import parse_source_input
from sqltips.schemas import DocumentQuery, InspectionResult, SourceKind
from sqltips.utils.logging_config import get_logger

logger = get_logger(__name__)

BUNDLED_DOCUMENT = "sql_tips.md"
BUNDLED_SOURCE_LABEL = f"bundled:{BUNDLED_DOCUMENT}"


@dataclass
class InspectionOptions:
    """Options for document inspection.

    Attributes:
        checks: Options forwarded to the structural checks.
        include_toc: If True, include a generated table of contents in the
            formatted content.
        use_cache: If True, reuse a fresh cached copy of remote documents.
    """

    checks: CheckOptions = field(default_factory=CheckOptions)
    include_toc: bool = True
    use_cache: bool = True


def read_bundled_document() -> str:
    """Return the text of the SQL tips document shipped with the package."""
    return (resources.files("sqltips") / "data" / BUNDLED_DOCUMENT).read_text(encoding="utf-8")


async def load_document(query: DocumentQuery, *, use_cache: bool = True) -> str:
    """Load the text a query points at.

    Raises:
        DocumentNotFoundError: If a local path does not exist or a URL 404s.
        DocumentAccessError: If a local file cannot be read.
        ParseError: If a local file is not valid UTF-8.
        FetchError: If a remote fetch fails after retries.
    """
    if query.kind == SourceKind.BUNDLED:
        return read_bundled_document()

    if query.kind == SourceKind.PATH:
        path = query.path
        if path is None or not path.is_file():
            raise DocumentNotFoundError(f"No such file: {query.input_text}")
        try:
            return await read_text_async(path)
        except UnicodeDecodeError as exc:
            raise ParseError(f"{path} is not valid UTF-8 text: {exc}") from exc
        except OSError as exc:
            raise DocumentAccessError(f"Cannot read {path}: {exc}") from exc

    return await fetch_document(
        query.url or query.input_text,
        use_cache=use_cache,
        cache_dir=query.cache_dir,
    )


def source_label(query: DocumentQuery) -> str:
    if query.kind == SourceKind.BUNDLED:
        return BUNDLED_SOURCE_LABEL
    if query.kind == SourceKind.URL:
        return query.url or query.input_text
    return str(query.path)


def inspect_text(
    text: str,
    *,
    source: str = "<text>",
    options: InspectionOptions | None = None,
) -> InspectionResult:
    """Parse, check and format document text that is already in memory."""
    opts = options or InspectionOptions()
    document = parse_document(text)
    report = run_checks(document, opts.checks)
    logger.info(
        "Inspected document",
        extra={
            "source": source,
            "passed": report.passed,
            "errors": len(report.errors),
            "warnings": len(report.warnings),
        },
    )
    return format_document(document, source=source, report=report, include_toc=opts.include_toc)


async def inspect_document(
    source: str | None = None,
    *,
    options: InspectionOptions | None = None,
) -> InspectionResult:
    """Load a document from a path, URL or the bundled copy and inspect it.

    Args:
        source: Local path or http(s) URL. None or empty inspects the
            bundled document.
        options: Inspection options. Uses defaults if None.

    Returns:
        Summary, section tree, content and the check report.

    Raises:
        InvalidSourceError: If the source string cannot be used.
        DocumentNotFoundError: If the document does not exist.
        FetchError: If fetching a remote document fails.
    """
    opts = options or InspectionOptions()
    query = parse_source_input(source)
    text = await load_document(query, use_cache=opts.use_cache)
    return inspect_text(text, source=source_label(query), options=opts)
