"""Fetch and cache remote documents."""

from __future__ import annotations

from pathlib import Path

from sqltips.cache_utils import (
    cache_dir_for,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    write_text_async,
)
from sqltips.config import SQLTIPS_CACHE_PATH, SQLTIPS_CACHE_TTL_SECONDS
from sqltips.http_utils import fetch_text
from sqltips.utils.logging_config import get_logger

logger = get_logger(__name__)

_CACHE_FILENAME = "document.md"


async def fetch_document(
    url: str,
    *,
    use_cache: bool = True,
    cache_dir: Path | None = None,
) -> str:
    """Fetch a markdown document and cache it locally.

    Args:
        url: URL to fetch the raw markdown from.
        use_cache: Whether to use cached text if it is still fresh.
        cache_dir: Directory holding this URL's cached copy; defaults to a
            per-URL directory under ``SQLTIPS_CACHE_PATH``.

    Returns:
        The document text.

    Raises:
        DocumentNotFoundError: If the URL answers 404.
        FetchError: If a network error persists after retries.
    """
    if cache_dir is None:
        cache_dir = cache_dir_for(url, SQLTIPS_CACHE_PATH)
    cached = cache_dir / _CACHE_FILENAME

    if use_cache and is_cache_fresh(cached, SQLTIPS_CACHE_TTL_SECONDS):
        logger.debug("Using cached document", extra={"url": url, "path": str(cached)})
        return await read_text_async(cached)

    text = await fetch_text(url)
    try:
        await mkdir_async(cache_dir, parents=True, exist_ok=True)
        await write_text_async(cached, text)
    except OSError as exc:
        logger.warning(
            "Could not cache fetched document",
            extra={"url": url, "path": str(cached), "error": str(exc)},
        )
    logger.info("Fetched document", extra={"url": url, "chars": len(text)})
    return text
