"""Generate and rewrite the table of contents from the headings."""

from __future__ import annotations

from sqltips.parser import parse_document
from sqltips.schemas import Document
from sqltips.slugs import link_text

_DEFAULT_TOC_TITLE = "Table of contents"


def render_toc(document: Document, *, depth: int = 1) -> str:
    """Render a markdown list linking every tip section.

    Args:
        document: Parsed document.
        depth: 1 lists the tip sections only; 2 and above also list their
            sub-headings down to heading level ``depth + 1``.

    Returns:
        The list as markdown, one entry per line, without a trailing newline.
    """
    lines: list[str] = []
    for section in document.sections:
        lines.append(f"- [{link_text(section.title)}](#{section.slug})")
        for heading in section.subheadings:
            if heading.level - 1 > depth:
                continue
            indent = "  " * (heading.level - 2)
            lines.append(f"{indent}- [{link_text(heading.text)}](#{heading.slug})")
    return "\n".join(lines)


def update_toc(text: str, *, depth: int = 1) -> str:
    """Return ``text`` with its table of contents regenerated.

    An existing ToC list is replaced in place. Without one, a "Table of
    contents" block is inserted right before the first tip section (or
    under an existing, empty ToC heading). Text without tip sections is
    returned unchanged.
    """
    document = parse_document(text)
    if not document.sections:
        return text

    toc_lines = render_toc(document, depth=depth).splitlines()
    lines = text.splitlines()

    if document.toc_span is not None:
        start, end = document.toc_span
        lines[start:end] = toc_lines
    elif document.toc_heading is not None:
        insert_at = document.toc_heading.line
        lines[insert_at:insert_at] = ["", *toc_lines]
    else:
        insert_at = document.sections[0].line - 1
        lines[insert_at:insert_at] = [f"## {_DEFAULT_TOC_TITLE}", "", *toc_lines, ""]

    result = "\n".join(lines)
    if text.endswith("\n"):
        result += "\n"
    return result
