"""Lexical sanity checks for SQL snippets.

This is deliberately weak: it only tracks string literals, quoted
identifiers, comments and parentheses. It does not know SQL grammar.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass

_DOLLAR_TAG_RE = re.compile(r"\$([A-Za-z_][A-Za-z0-9_]*)?\$")

# Closing quote for each quoted token kind.
_QUOTES = {
    "'": ("string literal", "sql-unclosed-string"),
    '"': ("quoted identifier", "sql-unclosed-identifier"),
    "`": ("quoted identifier", "sql-unclosed-identifier"),
}


@dataclass(frozen=True)
class SqlIssue:
    """A lexical problem in a snippet, positioned relative to the snippet."""

    code: str
    message: str
    line: int
    column: int


def scan_sql(sql: str) -> list[SqlIssue]:
    """Report unclosed literals, identifiers, comments and unbalanced parentheses.

    Quotes are escaped by doubling (``'it''s'``). Line comments (``--``),
    block comments and PostgreSQL dollar-quoted bodies are skipped.
    Every problem is reported; scanning does not stop at the first one.

    Args:
        sql: The snippet text.

    Returns:
        Issues in the order they were found, with 1-based line and column.
    """
    issues: list[SqlIssue] = []
    open_parens: list[tuple[int, int]] = []
    line_starts = _line_starts(sql)
    length = len(sql)
    pos = 0

    def where(offset: int) -> tuple[int, int]:
        line = _line_for(line_starts, offset)
        return line + 1, offset - line_starts[line] + 1

    while pos < length:
        char = sql[pos]

        if sql.startswith("--", pos):
            newline = sql.find("\n", pos)
            pos = length if newline == -1 else newline + 1
            continue

        if sql.startswith("/*", pos):
            end = sql.find("*/", pos + 2)
            if end == -1:
                line, column = where(pos)
                issues.append(
                    SqlIssue("sql-unclosed-comment", "Unclosed block comment", line, column)
                )
                break
            pos = end + 2
            continue

        if char in _QUOTES:
            end = _find_closing_quote(sql, pos, char)
            if end == -1:
                label, code = _QUOTES[char]
                line, column = where(pos)
                issues.append(SqlIssue(code, f"Unclosed {label} starting with {char}", line, column))
                break
            pos = end + 1
            continue

        if char == "$":
            tag = _DOLLAR_TAG_RE.match(sql, pos)
            if tag and (pos == 0 or not (sql[pos - 1].isalnum() or sql[pos - 1] == "_")):
                delimiter = tag.group(0)
                end = sql.find(delimiter, tag.end())
                if end == -1:
                    line, column = where(pos)
                    issues.append(
                        SqlIssue(
                            "sql-unclosed-string",
                            f"Unclosed dollar-quoted string starting with {delimiter}",
                            line,
                            column,
                        )
                    )
                    break
                pos = end + len(delimiter)
                continue

        if char == "(":
            open_parens.append(where(pos))
        elif char == ")":
            if open_parens:
                open_parens.pop()
            else:
                line, column = where(pos)
                issues.append(
                    SqlIssue("sql-unbalanced-paren", "Closing parenthesis without a match", line, column)
                )
        pos += 1

    for line, column in open_parens:
        issues.append(SqlIssue("sql-unbalanced-paren", "Unclosed parenthesis", line, column))

    return issues


def _find_closing_quote(sql: str, start: int, quote: str) -> int:
    pos = start + 1
    while True:
        end = sql.find(quote, pos)
        if end == -1:
            return -1
        if sql.startswith(quote * 2, end):
            pos = end + 2
            continue
        return end


def _line_starts(text: str) -> list[int]:
    starts = [0]
    for match in re.finditer("\n", text):
        starts.append(match.end())
    return starts


def _line_for(line_starts: list[int], offset: int) -> int:
    return bisect_right(line_starts, offset) - 1
