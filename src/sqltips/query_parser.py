"""Classify a document source string as bundled, local path or URL."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

from sqltips.cache_utils import cache_dir_for
from sqltips.config import SQLTIPS_CACHE_PATH
from sqltips.exceptions import InvalidSourceError
from sqltips.schemas import DocumentQuery, SourceKind

_ALLOWED_SCHEMES = {"http", "https"}
_GITHUB_HOSTS = {"github.com", "www.github.com"}
_RAW_GITHUB = "https://raw.githubusercontent.com"


def parse_source_input(input_text: str | None) -> DocumentQuery:
    """Parse a path, URL, or nothing (the bundled document) into a query.

    GitHub ``blob`` links are rewritten to their raw content URL, and a bare
    ``github.com/<owner>/<repo>`` link points at the repository README.

    Raises:
        InvalidSourceError: For unsupported schemes, URLs carrying
            credentials, or URLs without a host.
    """
    text = (input_text or "").strip()

    if not text:
        return DocumentQuery(
            input_text=text,
            kind=SourceKind.BUNDLED,
        )

    if "://" not in text:
        return DocumentQuery(
            input_text=text,
            kind=SourceKind.PATH,
            path=Path(text).expanduser(),
        )

    url = _normalize_url(text)
    return DocumentQuery(
        input_text=text,
        kind=SourceKind.URL,
        url=url,
        cache_dir=cache_dir_for(url, SQLTIPS_CACHE_PATH),
    )


def _normalize_url(text: str) -> str:
    parsed = urlparse(text)
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES:
        raise InvalidSourceError(f"Unsupported URL scheme: {parsed.scheme!r}")
    if parsed.username or parsed.password or "@" in parsed.netloc:
        raise InvalidSourceError("URLs with credentials are not allowed")
    host = (parsed.hostname or "").lower()
    if not host:
        raise InvalidSourceError(f"URL has no host: {text!r}")

    if host in _GITHUB_HOSTS:
        return _github_raw_url(parsed.path) or text
    return text


def _github_raw_url(path: str) -> str | None:
    parts = [part for part in path.split("/") if part]
    if len(parts) == 2:
        owner, repo = parts
        return f"{_RAW_GITHUB}/{owner}/{repo}/HEAD/README.md"
    if len(parts) >= 5 and parts[2] == "blob":
        owner, repo, _, ref, *rest = parts
        return f"{_RAW_GITHUB}/{owner}/{repo}/{ref}/{'/'.join(rest)}"
    return None
