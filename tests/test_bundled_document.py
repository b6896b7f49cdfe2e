"""The shipped SQL tips document must pass its own checks."""

from __future__ import annotations

import pytest

from sqltips.checks import run_checks
from sqltips.inspection import read_bundled_document
from sqltips.parser import parse_document
from sqltips.sql_checks import scan_sql
from sqltips.toc import update_toc


@pytest.fixture(scope="module")
def bundled_text() -> str:
    return read_bundled_document()


def test_has_eleven_tip_sections(bundled_text: str) -> None:
    document = parse_document(bundled_text)

    assert len(document.sections) == 11
    assert len(document.toc) == 11


def test_passes_all_checks_without_warnings(bundled_text: str) -> None:
    report = run_checks(parse_document(bundled_text))

    assert report.passed, report.issues
    assert report.issues == []


def test_dummy_value_entry_matches_heading(bundled_text: str) -> None:
    document = parse_document(bundled_text)
    entry = "[Use a dummy value in the WHERE clause](#use-a-dummy-value-in-the-where-clause)"

    assert entry in bundled_text
    assert "use-a-dummy-value-in-the-where-clause" in {section.slug for section in document.sections}


def test_every_example_is_tagged_sql(bundled_text: str) -> None:
    document = parse_document(bundled_text)

    examples = [example for section in document.sections for example in section.examples]
    assert examples
    assert all(example.language == "sql" for example in examples)
    assert all(scan_sql(example.content) == [] for example in examples)


def test_toc_is_up_to_date(bundled_text: str) -> None:
    assert update_toc(bundled_text) == bundled_text
