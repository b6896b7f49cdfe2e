"""Pydantic models for the API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator, model_validator

from server.server_config import MAX_CONTENT_SIZE
from sqltips.config import SQLTIPS_EXPECTED_SECTIONS
from sqltips.schemas import Issue


class DocumentRequest(BaseModel):
    """Where the document to work on comes from.

    Attributes
    ----------
    source : str | None
        http(s) URL of the document. Omit both ``source`` and ``content``
        to use the bundled document.
    content : str | None
        Markdown text sent inline.

    """

    source: str | None = Field(default=None, description="URL of the markdown document")
    content: str | None = Field(
        default=None,
        max_length=MAX_CONTENT_SIZE,
        description="Inline markdown document",
    )

    @field_validator("source")
    @classmethod
    def strip_source(cls, v: str | None) -> str | None:
        """Treat a blank ``source`` as missing."""
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def check_single_origin(self) -> DocumentRequest:
        """Reject requests that send both ``source`` and ``content``."""
        if self.source is not None and self.content is not None:
            err = "Provide either source or content, not both"
            raise ValueError(err)
        return self


class CheckRequest(DocumentRequest):
    """Request model for the /api/check endpoint.

    Attributes
    ----------
    expected_sections : int
        Number of tip sections the document must contain.
    count_sections : bool
        Whether to run the section count check at all.
    check_sql : bool
        Whether to scan SQL snippets.

    """

    expected_sections: int = Field(default=SQLTIPS_EXPECTED_SECTIONS, ge=0)
    count_sections: bool = Field(default=True, description="Run the section count check")
    check_sql: bool = Field(default=True, description="Scan SQL snippets for lexical problems")


class TocRequest(DocumentRequest):
    """Request model for the /api/toc endpoint."""

    depth: int = Field(default=1, ge=1, le=5, description="Heading depth below tip sections")


class CheckSuccessResponse(BaseModel):
    """Success response model for the /api/check endpoint.

    Attributes
    ----------
    source : str
        Label of the checked document.
    passed : bool
        True when no issue has severity ``error``.
    summary : str
        Document summary including counts and token estimate.
    sections_tree : str
        Section tree of the document.
    issues : list[Issue]
        Every issue found.
    unresolved_anchors : list[str]
        Table of contents anchors that match no heading.

    """

    source: str
    passed: bool
    summary: str
    sections_tree: str
    issues: list[Issue]
    unresolved_anchors: list[str] = Field(default_factory=list)
    section_count: int
    toc_count: int


class TocSuccessResponse(BaseModel):
    """Success response model for the /api/toc endpoint."""

    toc: str = Field(..., description="Generated table of contents")
    content: str = Field(..., description="Document with the table of contents rewritten")
    changed: bool = Field(..., description="Whether the rewrite changed the document")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


CheckResponse = Union[CheckSuccessResponse, ErrorResponse]
TocResponse = Union[TocSuccessResponse, ErrorResponse]
