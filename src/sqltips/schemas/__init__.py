"""Shared schemas for sqltips."""

from sqltips.schemas.document import CodeExample, Document, Heading, Section, TocEntry
from sqltips.schemas.inspection import InspectionResult
from sqltips.schemas.query import DocumentQuery, SourceKind
from sqltips.schemas.report import CheckReport, Issue, Severity

__all__ = [
    "CheckReport",
    "CodeExample",
    "Document",
    "DocumentQuery",
    "Heading",
    "InspectionResult",
    "Issue",
    "Section",
    "Severity",
    "SourceKind",
    "TocEntry",
]
