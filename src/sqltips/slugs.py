"""Heading text to anchor slug conversion, following GitHub's renderer."""

from __future__ import annotations

import re

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for inline HTML handling (pip install beautifulsoup4)."
    ) from exc


_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_REF_LINK_RE = re.compile(r"\[([^\]]*)\]\[[^\]]*\]")
_CODE_RE = re.compile(r"`+([^`]*)`+")
_STRONG_EM_RE = re.compile(r"(\*{1,3})(\S(?:.*?\S)?)\1")
_UNDERSCORE_EM_RE = re.compile(r"(?<!\w)(_{1,3})(\S(?:.*?\S)?)\1(?!\w)")
_STRIKE_RE = re.compile(r"~~(.+?)~~")
_DROP_RE = re.compile(r"[^\w\- ]", re.UNICODE)
# Private-use characters mark where code spans were lifted out.
_SPAN_OPEN = "\ue000"
_SPAN_CLOSE = "\ue001"
_SPAN_RE = re.compile(f"{_SPAN_OPEN}(\\d+){_SPAN_CLOSE}")


def _hold_code_spans(text: str, *, keep_ticks: bool) -> tuple[str, list[str]]:
    spans: list[str] = []

    def _hold(match: re.Match[str]) -> str:
        spans.append(match.group(0) if keep_ticks else match.group(1))
        return f"{_SPAN_OPEN}{len(spans) - 1}{_SPAN_CLOSE}"

    return _CODE_RE.sub(_hold, text), spans


def _restore_code_spans(text: str, spans: list[str]) -> str:
    return _SPAN_RE.sub(lambda match: spans[int(match.group(1))], text)


def _strip_links(text: str) -> str:
    if "<" in text and ">" in text:
        text = BeautifulSoup(text, "html.parser").get_text()
    text = _IMAGE_RE.sub(r"\1", text)
    text = _LINK_RE.sub(r"\1", text)
    return _REF_LINK_RE.sub(r"\1", text)


def plain_text(text: str) -> str:
    """Strip inline markdown and HTML, keeping the visible text.

    Code span contents are literal: ``<table>`` inside backticks stays text.
    """
    text, spans = _hold_code_spans(text, keep_ticks=False)
    text = _strip_links(text)
    text = _STRONG_EM_RE.sub(r"\2", text)
    text = _UNDERSCORE_EM_RE.sub(r"\2", text)
    text = _STRIKE_RE.sub(r"\1", text)
    return _restore_code_spans(text, spans).strip()


def link_text(text: str) -> str:
    """Heading text that can sit inside a markdown link.

    Links, images and inline HTML are unwrapped; code spans and emphasis
    are kept as written.
    """
    text, spans = _hold_code_spans(text, keep_ticks=True)
    return _restore_code_spans(_strip_links(text), spans).strip()


def slugify(text: str) -> str:
    """Convert one heading's text to its anchor slug.

    Lowercases, drops everything but word characters, hyphens and spaces,
    then turns each space into a hyphen. Runs of spaces are not collapsed.

    >>> slugify("Use a dummy value in the WHERE clause")
    'use-a-dummy-value-in-the-where-clause'
    """
    slug = _DROP_RE.sub("", plain_text(text).lower())
    return slug.replace(" ", "-")


class SlugRegistry:
    """Assigns unique slugs across a document.

    Repeated slugs get ``-1``, ``-2`` ... appended in the order headings
    appear.
    """

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def add(self, text: str) -> str:
        original = slugify(text)
        result = original
        while result in self._occurrences:
            self._occurrences[original] += 1
            result = f"{original}-{self._occurrences[original]}"
        self._occurrences[result] = 0
        return result

    def __contains__(self, slug: str) -> bool:
        return slug in self._occurrences
