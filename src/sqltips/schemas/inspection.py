"""Inspection output model."""

from __future__ import annotations

from pydantic import BaseModel

from sqltips.schemas.report import CheckReport


class InspectionResult(BaseModel):
    """Final inspection output."""

    source: str
    summary: str
    sections_tree: str
    content: str
    report: CheckReport
