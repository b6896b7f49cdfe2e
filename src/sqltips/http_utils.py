"""HTTP fetching with retries for remote documents."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from sqltips.config import (
    SQLTIPS_FETCH_BACKOFF_S,
    SQLTIPS_FETCH_MAX_RETRIES,
    SQLTIPS_FETCH_TIMEOUT_S,
    SQLTIPS_USER_AGENT,
)
from sqltips.exceptions import DocumentNotFoundError, FetchError
from sqltips.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_text(url: str, *, client: httpx.AsyncClient | None = None) -> str:
    """Fetch a text document, retrying transient failures.

    Retries on connection errors and on 429/5xx responses with exponential
    backoff. A 404 is not retried.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Returns:
        The response body decoded as text.

    Raises:
        DocumentNotFoundError: If the server answers 404.
        FetchError: If the fetch still fails after all retries.
    """
    last_exc: Exception | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(SQLTIPS_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    raise DocumentNotFoundError(f"Document not found at {url}")

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < SQLTIPS_FETCH_MAX_RETRIES:
                backoff = SQLTIPS_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying fetch",
                    extra={"url": url, "attempt": attempt + 1, "error": str(last_exc)},
                )
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(SQLTIPS_FETCH_TIMEOUT_S),
        headers={"User-Agent": SQLTIPS_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
