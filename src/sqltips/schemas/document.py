"""Document structure models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """An ATX heading and the anchor slug it renders to."""

    level: int = Field(..., ge=1, le=6)
    text: str
    slug: str
    line: int


class CodeExample(BaseModel):
    """A fenced code block."""

    language: str | None = None
    content: str
    line: int
    closed: bool = True

    @property
    def is_sql(self) -> bool:
        return self.language == "sql"


class TocEntry(BaseModel):
    """A table of contents link pointing at an in-document anchor."""

    text: str
    anchor: str
    depth: int = 0
    line: int


class Section(BaseModel):
    """A top-level tip: heading, prose paragraphs and examples."""

    title: str
    slug: str
    line: int
    prose: list[str] = Field(default_factory=list)
    examples: list[CodeExample] = Field(default_factory=list)
    subheadings: list[Heading] = Field(default_factory=list)
    markdown: str = ""


class Document(BaseModel):
    """A parsed tips document.

    Attributes:
        title: Text of the first level-1 heading, if any.
        intro: Prose paragraphs between the title and the first section.
        sections: Tip sections in document order.
        toc: Table of contents entries in document order.
        toc_span: Zero-based ``(start, end)`` line range of the ToC list,
            end exclusive, or None when the document has no ToC.
        toc_heading: The heading introducing the ToC, when it has one.
        headings: Every heading in the document with its final slug.
        html_anchors: Anchors declared with inline ``<a name>``/``<a id>``.
        code_blocks: Every fenced block, including ones outside sections.
        text: The source text the document was parsed from.
    """

    title: str | None = None
    intro: list[str] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)
    toc: list[TocEntry] = Field(default_factory=list)
    toc_span: tuple[int, int] | None = None
    toc_heading: Heading | None = None
    headings: list[Heading] = Field(default_factory=list)
    html_anchors: list[str] = Field(default_factory=list)
    code_blocks: list[CodeExample] = Field(default_factory=list)
    text: str = ""
