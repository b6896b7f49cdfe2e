"""Process API requests by loading, checking and rewriting documents."""

from __future__ import annotations

from sqltips.checks import CheckOptions
from sqltips.exceptions import InvalidSourceError, SqlTipsError
from sqltips.inspection import InspectionOptions, inspect_text, load_document, source_label
from sqltips.parser import parse_document
from sqltips.query_parser import parse_source_input
from sqltips.schemas import SourceKind
from sqltips.toc import render_toc, update_toc
from sqltips.utils.logging_config import get_logger
from server.models import (
    CheckRequest,
    CheckResponse,
    CheckSuccessResponse,
    DocumentRequest,
    ErrorResponse,
    TocRequest,
    TocResponse,
    TocSuccessResponse,
)

logger = get_logger(__name__)

_INLINE_SOURCE = "<request>"


async def _resolve_text(request: DocumentRequest) -> tuple[str, str]:
    """Return ``(text, source label)`` for a request."""
    if request.content is not None:
        return request.content, _INLINE_SOURCE
    query = parse_source_input(request.source)
    if query.kind == SourceKind.PATH:
        raise InvalidSourceError("Local file paths are not accepted; send the content or a URL")
    text = await load_document(query)
    return text, source_label(query)


async def process_check(request: CheckRequest) -> CheckResponse:
    """Run the checks for a request and build the response."""
    try:
        text, source = await _resolve_text(request)
    except SqlTipsError as exc:
        logger.warning("Failed to load document", extra={"source": request.source, "error": str(exc)})
        return ErrorResponse(error=str(exc))

    options = InspectionOptions(
        checks=CheckOptions(
            expected_sections=request.expected_sections if request.count_sections else None,
            check_sql=request.check_sql,
        ),
    )
    result = inspect_text(text, source=source, options=options)
    report = result.report

    return CheckSuccessResponse(
        source=result.source,
        passed=report.passed,
        summary=result.summary,
        sections_tree=result.sections_tree,
        issues=report.issues,
        unresolved_anchors=report.unresolved_anchors,
        section_count=report.section_count,
        toc_count=report.toc_count,
    )


async def process_toc(request: TocRequest) -> TocResponse:
    """Generate the table of contents and the rewritten document."""
    try:
        text, source = await _resolve_text(request)
    except SqlTipsError as exc:
        logger.warning("Failed to load document", extra={"source": request.source, "error": str(exc)})
        return ErrorResponse(error=str(exc))

    toc = render_toc(parse_document(text), depth=request.depth)
    updated = update_toc(text, depth=request.depth)
    logger.info("Generated table of contents", extra={"source": source, "changed": updated != text})
    return TocSuccessResponse(toc=toc, content=updated, changed=updated != text)
