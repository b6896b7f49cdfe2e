"""Check report models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """How much an issue matters."""

    ERROR = "error"
    WARNING = "warning"


class Issue(BaseModel):
    """A single problem found in the document."""

    code: str
    severity: Severity = Severity.ERROR
    message: str
    line: int | None = None
    anchor: str | None = None


class CheckReport(BaseModel):
    """Outcome of running every check over a document."""

    issues: list[Issue] = Field(default_factory=list)
    section_count: int = 0
    toc_count: int = 0
    code_block_count: int = 0

    @property
    def errors(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity == Severity.WARNING]

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def unresolved_anchors(self) -> list[str]:
        """Anchors from the table of contents that match no heading."""
        return [
            issue.anchor
            for issue in self.issues
            if issue.code == "unresolved-anchor" and issue.anchor is not None
        ]
