"""Structural checks over a parsed tips document."""

from __future__ import annotations

from dataclasses import dataclass

from sqltips.config import SQLTIPS_EXPECTED_SECTIONS
from sqltips.schemas import CheckReport, Document, Heading, Issue, Severity
from sqltips.slugs import plain_text
from sqltips.sql_checks import scan_sql
from sqltips.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CheckOptions:
    """Options for a check run.

    Attributes:
        expected_sections: Number of tip sections the document must have.
            None disables the count check.
        check_sql: If True, scan every SQL block for lexical problems.
        check_prose: If True, require prose in every section.
        require_examples: If True, warn about sections without code.
    """

    expected_sections: int | None = SQLTIPS_EXPECTED_SECTIONS
    check_sql: bool = True
    check_prose: bool = True
    require_examples: bool = True


def run_checks(document: Document, options: CheckOptions | None = None) -> CheckReport:
    """Run every enabled check and collect all issues into one report."""
    opts = options or CheckOptions()

    issues: list[Issue] = []
    issues.extend(check_anchors(document))
    if opts.check_prose:
        issues.extend(check_prose(document))
    if opts.require_examples:
        issues.extend(check_examples(document))
    issues.extend(check_code_blocks(document, check_sql=opts.check_sql))
    issues.extend(check_section_count(document, expected=opts.expected_sections))

    issues.sort(key=lambda issue: (issue.line is None, issue.line or 0))
    report = CheckReport(
        issues=issues,
        section_count=len(document.sections),
        toc_count=len(document.toc),
        code_block_count=len(document.code_blocks),
    )
    logger.debug(
        "Checks finished",
        extra={
            "errors": len(report.errors),
            "warnings": len(report.warnings),
            "sections": report.section_count,
        },
    )
    return report


def check_anchors(document: Document) -> list[Issue]:
    """Verify the table of contents and the headings map one to one.

    Every ToC anchor must resolve to exactly one heading (or inline HTML
    anchor), and each heading may be referenced at most once. Tip sections
    missing from the ToC are reported too.
    """
    if not document.toc:
        if not document.sections:
            return []
        return [
            Issue(
                code="missing-toc",
                message="Document has tip sections but no table of contents",
                line=document.sections[0].line,
            )
        ]

    headings: dict[str, Heading] = {heading.slug: heading for heading in document.headings}
    html_anchors = set(document.html_anchors)
    referenced: set[str] = set()
    issues: list[Issue] = []

    for entry in document.toc:
        heading = headings.get(entry.anchor)
        in_html = entry.anchor in html_anchors

        if heading is None and not in_html:
            message = f"Table of contents link #{entry.anchor} does not match any heading"
            suggestion = _suggest(entry.anchor, headings)
            if suggestion:
                message += f" (did you mean #{suggestion}?)"
            issues.append(
                Issue(code="unresolved-anchor", message=message, line=entry.line, anchor=entry.anchor)
            )
            continue

        if heading is not None and in_html:
            issues.append(
                Issue(
                    code="ambiguous-anchor",
                    message=f"#{entry.anchor} matches both a heading and an inline HTML anchor",
                    line=entry.line,
                    anchor=entry.anchor,
                )
            )

        if entry.anchor in referenced:
            issues.append(
                Issue(
                    code="duplicate-toc-entry",
                    message=f"#{entry.anchor} is listed more than once in the table of contents",
                    line=entry.line,
                    anchor=entry.anchor,
                )
            )
        referenced.add(entry.anchor)

        if heading is not None and plain_text(entry.text) != plain_text(heading.text):
            issues.append(
                Issue(
                    code="toc-text-mismatch",
                    severity=Severity.WARNING,
                    message=(
                        f"Table of contents text {plain_text(entry.text)!r} differs from "
                        f"heading {plain_text(heading.text)!r}"
                    ),
                    line=entry.line,
                    anchor=entry.anchor,
                )
            )

    for section in document.sections:
        if section.slug not in referenced:
            issues.append(
                Issue(
                    code="unreferenced-section",
                    message=f"Section {section.title!r} is missing from the table of contents",
                    line=section.line,
                    anchor=section.slug,
                )
            )

    return issues


def check_prose(document: Document) -> list[Issue]:
    """Every section needs at least one non-empty prose paragraph."""
    return [
        Issue(
            code="missing-prose",
            message=f"Section {section.title!r} has no explanatory prose",
            line=section.line,
            anchor=section.slug,
        )
        for section in document.sections
        if not any(paragraph.strip() for paragraph in section.prose)
    ]


def check_examples(document: Document) -> list[Issue]:
    return [
        Issue(
            code="missing-example",
            severity=Severity.WARNING,
            message=f"Section {section.title!r} has no code example",
            line=section.line,
            anchor=section.slug,
        )
        for section in document.sections
        if not section.examples
    ]


def check_code_blocks(document: Document, *, check_sql: bool = True) -> list[Issue]:
    """Flag unclosed fences, untagged fences and lexically broken SQL."""
    issues: list[Issue] = []
    for block in document.code_blocks:
        if not block.closed:
            issues.append(
                Issue(
                    code="unclosed-code-fence",
                    message="Code fence is never closed",
                    line=block.line,
                )
            )
        if block.language is None:
            issues.append(
                Issue(
                    code="untagged-code-block",
                    severity=Severity.WARNING,
                    message="Code block has no language tag",
                    line=block.line,
                )
            )
            continue
        if check_sql and block.is_sql:
            for sql_issue in scan_sql(block.content):
                issues.append(
                    Issue(
                        code=sql_issue.code,
                        message=f"{sql_issue.message} (column {sql_issue.column})",
                        line=block.line + sql_issue.line,
                    )
                )
    return issues


def check_section_count(document: Document, *, expected: int | None) -> list[Issue]:
    """Compare the number of tip sections with the expected and ToC counts."""
    issues: list[Issue] = []
    count = len(document.sections)
    if expected is not None and count != expected:
        issues.append(
            Issue(
                code="section-count",
                message=f"Expected {expected} tip sections, found {count}",
            )
        )

    top_level = [entry for entry in document.toc if entry.depth == 0]
    if document.toc and len(top_level) != count:
        issues.append(
            Issue(
                code="toc-count",
                message=f"Table of contents lists {len(top_level)} sections, document has {count}",
                line=top_level[0].line if top_level else document.toc[0].line,
            )
        )
    return issues


def _suggest(anchor: str, headings: dict[str, Heading]) -> str | None:
    lowered = anchor.lower()
    if lowered != anchor and lowered in headings:
        return lowered
    return None
