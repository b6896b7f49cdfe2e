"""Format a parsed document and its check report into text outputs."""

from __future__ import annotations

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from sqltips.schemas import CheckReport, Document, InspectionResult, Section
from sqltips.toc import render_toc


def format_document(
    document: Document,
    *,
    source: str,
    report: CheckReport,
    include_toc: bool = True,
) -> InspectionResult:
    """Create summary, section tree, and content."""
    tree = "Sections:\n" + _create_sections_tree(document.sections)
    content = _render_content(document, include_toc=include_toc)

    summary_lines = []
    if document.title:
        summary_lines.append(f"Title: {document.title}")
    summary_lines.append(f"Source: {source}")
    summary_lines.append(f"Sections: {len(document.sections)}")
    summary_lines.append(f"Table of contents entries: {len(document.toc)}")
    summary_lines.append(f"Code examples: {count_examples(document.sections)}")
    status = "passed" if report.passed else "failed"
    summary_lines.append(
        f"Checks: {status} ({len(report.errors)} errors, {len(report.warnings)} warnings)"
    )

    token_estimate = _format_token_count(tree + "\n" + content)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    summary = "\n".join(summary_lines)

    return InspectionResult(
        source=source,
        summary=summary,
        sections_tree=tree,
        content=content,
        report=report,
    )


def format_report(report: CheckReport) -> str:
    """Render a report as one line per issue followed by a verdict."""
    lines = []
    for issue in report.issues:
        location = f"line {issue.line}" if issue.line is not None else "document"
        lines.append(f"{location}: {issue.severity.value} [{issue.code}] {issue.message}")
    verdict = "PASSED" if report.passed else "FAILED"
    lines.append(f"{verdict}: {len(report.errors)} errors, {len(report.warnings)} warnings")
    return "\n".join(lines)


def count_examples(sections: list[Section]) -> int:
    """Count code examples across all sections."""
    return sum(len(section.examples) for section in sections)


def _render_content(document: Document, *, include_toc: bool) -> str:
    blocks: list[str] = []
    if document.title:
        blocks.append(f"# {document.title}")
    blocks.extend(document.intro)

    if include_toc:
        toc = render_toc(document)
        if toc:
            blocks.append("## Table of contents\n" + toc)

    for section in document.sections:
        blocks.extend(_render_section(section))

    return "\n\n".join(block for block in blocks if block).strip()


def _render_section(section: Section) -> list[str]:
    blocks = [f"## {section.title}"]
    if section.markdown:
        blocks.append(section.markdown)
    return blocks


def _create_sections_tree(sections: list[Section]) -> str:
    lines: list[str] = []
    for section in sections:
        lines.append(section.title)
        for heading in section.subheadings:
            lines.append(" " * ((heading.level - 2) * 4) + heading.text)
    return "\n".join(lines)


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
