"""Tests for the SQL snippet sanity scanner."""

from __future__ import annotations

import pytest

from sqltips.sql_checks import scan_sql


@pytest.mark.parametrize(
    "sql",
    [
        "SELECT 1;",
        "SELECT 'it''s fine' AS quote;",
        'SELECT "weird "" name" FROM t;',
        "SELECT `col` FROM `db`.`t`;",
        "SELECT COUNT(*) FROM (SELECT 1) AS x;",
        "SELECT 1 -- a stray ( in a comment\n;",
        "/* block (comment ' with quote */ SELECT 1;",
        "SELECT ')' AS paren;",
        "CREATE FUNCTION f() RETURNS int AS $$ SELECT ( $$ LANGUAGE sql;",
        "CREATE FUNCTION f() RETURNS int AS $body$ SELECT 1 $body$ LANGUAGE sql;",
        "SELECT price$usd FROM t;",
        "",
    ],
)
def test_clean_snippets_have_no_issues(sql: str) -> None:
    assert scan_sql(sql) == []


def test_unclosed_string_literal() -> None:
    issues = scan_sql("SELECT *\nFROM t\nWHERE name = 'Bob;")

    assert len(issues) == 1
    assert issues[0].code == "sql-unclosed-string"
    assert (issues[0].line, issues[0].column) == (3, 14)


def test_unclosed_quoted_identifier() -> None:
    issues = scan_sql('SELECT "name FROM t;')

    assert [issue.code for issue in issues] == ["sql-unclosed-identifier"]


def test_unclosed_block_comment() -> None:
    issues = scan_sql("SELECT 1 /* never closed")

    assert [issue.code for issue in issues] == ["sql-unclosed-comment"]


def test_unclosed_dollar_quote() -> None:
    issues = scan_sql("SELECT $$ open")

    assert [issue.code for issue in issues] == ["sql-unclosed-string"]


def test_unclosed_parenthesis_reports_opening_position() -> None:
    issues = scan_sql("SELECT COUNT(\n  id\nFROM t;")

    assert len(issues) == 1
    assert issues[0].code == "sql-unbalanced-paren"
    assert issues[0].message == "Unclosed parenthesis"
    assert (issues[0].line, issues[0].column) == (1, 13)


def test_stray_closing_parenthesis() -> None:
    issues = scan_sql("SELECT 1)")

    assert len(issues) == 1
    assert issues[0].message == "Closing parenthesis without a match"
    assert issues[0].column == 9


def test_reports_every_paren_problem() -> None:
    issues = scan_sql(") SELECT ((1")

    assert [issue.code for issue in issues] == ["sql-unbalanced-paren"] * 3


def test_parens_before_unclosed_string_are_still_reported() -> None:
    issues = scan_sql("SELECT (1, 'x")

    assert [issue.code for issue in issues] == ["sql-unclosed-string", "sql-unbalanced-paren"]
