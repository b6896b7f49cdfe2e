"""Query model describing where a document comes from."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class SourceKind(str, Enum):
    """Where the document text is loaded from."""

    BUNDLED = "bundled"
    PATH = "path"
    URL = "url"


class DocumentQuery(BaseModel):
    """Parsed document source details.

    Attributes:
        input_text: The original input text provided by the user.
        kind: Whether the source is the bundled document, a path or a URL.
        path: Local file path for ``PATH`` sources.
        url: Fetch URL for ``URL`` sources, after rewriting GitHub blob links.
        cache_dir: Directory that caches a fetched ``URL`` source.
    """

    input_text: str
    kind: SourceKind
    path: Path | None = None
    url: str | None = None
    cache_dir: Path | None = None
