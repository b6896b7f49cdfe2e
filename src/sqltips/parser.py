"""Parse a markdown tips document into its structure."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from sqltips.schemas import CodeExample, Document, Heading, Section, TocEntry
from sqltips.slugs import SlugRegistry, plain_text

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for inline HTML handling (pip install beautifulsoup4)."
    ) from exc


_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
_CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+$")
_FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_TOC_ITEM_RE = re.compile(
    r"^(?P<indent>\s*)(?:[-*+]|\d+[.)])\s+\[(?P<text>.+)\]\((?P<anchor>#[^)\s]*)(?:\s+\"[^\"]*\")?\)\s*$"
)
_HTML_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_TOC_TITLES = {"contents", "table of contents", "toc"}
_TOC_INDENT_WIDTH = 2


@dataclass
class _Text:
    line: int
    value: str


@dataclass
class _Fence:
    marker: str
    line: int
    language: str | None
    body: list[str] = field(default_factory=list)


def parse_document(text: str) -> Document:
    """Extract title, intro, table of contents and tip sections from markdown."""
    headings, items, code_blocks, html_anchors = _tokenize(text)
    document = Document(
        headings=headings,
        html_anchors=html_anchors,
        code_blocks=code_blocks,
        text=text,
    )
    _assemble(document, items)
    _attach_section_markdown(document, text.splitlines())
    return document


def is_toc_heading(heading: Heading) -> bool:
    """Return True for a level-2 heading that introduces the table of contents."""
    return heading.level == 2 and plain_text(heading.text).lower().rstrip(":") in _TOC_TITLES


def _tokenize(
    text: str,
) -> tuple[list[Heading], list[Heading | CodeExample | _Text], list[CodeExample], list[str]]:
    registry = SlugRegistry()
    headings: list[Heading] = []
    items: list[Heading | CodeExample | _Text] = []
    code_blocks: list[CodeExample] = []
    html_anchors: list[str] = []
    fence: _Fence | None = None
    in_comment = False

    for index, line in enumerate(text.splitlines()):
        lineno = index + 1
        if fence is not None:
            if _closes_fence(line, fence.marker):
                example = CodeExample(
                    language=fence.language,
                    content="\n".join(fence.body),
                    line=fence.line,
                )
                items.append(example)
                code_blocks.append(example)
                fence = None
            else:
                fence.body.append(line)
            continue

        line, in_comment = _strip_html_comments(line, in_comment)
        if in_comment and not line.strip():
            continue

        fence_match = _FENCE_OPEN_RE.match(line)
        if fence_match and not (fence_match.group(1)[0] == "`" and "`" in fence_match.group(2)):
            info = fence_match.group(2).strip().split()
            language = info[0].strip("{}.").lower() if info else None
            fence = _Fence(marker=fence_match.group(1), line=lineno, language=language or None)
            continue

        if "<a" in line:
            html_anchors.extend(_extract_html_anchors(line))

        heading_match = _HEADING_RE.match(line)
        if heading_match:
            heading_text = _CLOSING_HASHES_RE.sub("", heading_match.group(2) or "").strip()
            heading = Heading(
                level=len(heading_match.group(1)),
                text=heading_text,
                slug=registry.add(heading_text),
                line=lineno,
            )
            headings.append(heading)
            items.append(heading)
            continue

        items.append(_Text(line=lineno, value=line))

    if fence is not None:
        example = CodeExample(
            language=fence.language,
            content="\n".join(fence.body),
            line=fence.line,
            closed=False,
        )
        items.append(example)
        code_blocks.append(example)

    return headings, items, code_blocks, html_anchors


def _strip_html_comments(line: str, in_comment: bool) -> tuple[str, bool]:
    """Drop commented-out text from one line.

    Returns the visible part of the line and whether a comment is still open
    at its end.
    """
    if in_comment:
        end = line.find("-->")
        if end == -1:
            return "", True
        line = line[end + 3:]
    line = _HTML_COMMENT_RE.sub("", line)
    start = line.find("<!--")
    if start == -1:
        return line, False
    return line[:start], True


def _closes_fence(line: str, marker: str) -> bool:
    stripped = line.strip()
    if len(line) - len(line.lstrip(" ")) > 3:
        return False
    return (
        len(stripped) >= len(marker)
        and stripped == marker[0] * len(stripped)
    )


def _extract_html_anchors(line: str) -> list[str]:
    soup = BeautifulSoup(line, "lxml")
    anchors: list[str] = []
    for tag in soup.find_all("a"):
        for attr in ("name", "id"):
            value = tag.get(attr)
            if value:
                anchors.append(value)
    return anchors


def _assemble(document: Document, items: list[Heading | CodeExample | _Text]) -> None:
    section: Section | None = None
    in_preamble = True
    paragraph: list[str] = []
    toc_start: int | None = None
    toc_end: int | None = None

    def flush() -> None:
        if not paragraph:
            return
        block = "\n".join(paragraph).strip()
        paragraph.clear()
        if not plain_text(block):
            return
        if section is not None:
            section.prose.append(block)
        elif in_preamble:
            document.intro.append(block)

    for item in items:
        if isinstance(item, Heading):
            flush()
            if item.level == 1:
                if document.title is None:
                    document.title = item.text
                elif section is not None:
                    section = None
                continue
            if item.level == 2:
                if in_preamble and document.toc_heading is None and is_toc_heading(item):
                    document.toc_heading = item
                    continue
                in_preamble = False
                section = Section(title=item.text, slug=item.slug, line=item.line)
                document.sections.append(section)
                continue
            if section is not None:
                section.subheadings.append(item)
            continue

        if isinstance(item, CodeExample):
            flush()
            if section is not None:
                section.examples.append(item)
            continue

        if not item.value.strip():
            flush()
            continue

        if in_preamble:
            toc_match = _TOC_ITEM_RE.match(item.value)
            if toc_match:
                flush()
                indent = len(toc_match.group("indent").expandtabs(4))
                document.toc.append(
                    TocEntry(
                        text=toc_match.group("text").strip(),
                        anchor=toc_match.group("anchor")[1:],
                        depth=indent // _TOC_INDENT_WIDTH,
                        line=item.line,
                    )
                )
                if toc_start is None:
                    toc_start = item.line - 1
                toc_end = item.line
                continue

        paragraph.append(item.value)

    flush()
    if toc_start is not None and toc_end is not None:
        document.toc_span = (toc_start, toc_end)


def _attach_section_markdown(document: Document, lines: list[str]) -> None:
    # Section bodies end at the next level-1 or level-2 heading.
    boundaries = sorted(heading.line for heading in document.headings if heading.level <= 2)
    for section in document.sections:
        end = next((line - 1 for line in boundaries if line > section.line), len(lines))
        section.markdown = "\n".join(lines[section.line:end]).strip()
