"""Local configuration for sqltips."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".sqltips_cache"
DEFAULT_CACHE_TTL_SECONDS = 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "sqltips/0.1 (+https://github.com/sqltips/sqltips)"
DEFAULT_EXPECTED_SECTIONS = 11
DEFAULT_LOG_LEVEL = "WARNING"

# Local-only cache directory for fetched remote documents.
SQLTIPS_CACHE_PATH = Path(os.getenv("SQLTIPS_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
SQLTIPS_CACHE_TTL_SECONDS = int(os.getenv("SQLTIPS_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
SQLTIPS_FETCH_TIMEOUT_S = float(os.getenv("SQLTIPS_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
SQLTIPS_FETCH_MAX_RETRIES = int(os.getenv("SQLTIPS_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
SQLTIPS_FETCH_BACKOFF_S = float(os.getenv("SQLTIPS_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
SQLTIPS_USER_AGENT = os.getenv("SQLTIPS_USER_AGENT", DEFAULT_USER_AGENT)
SQLTIPS_EXPECTED_SECTIONS = int(os.getenv("SQLTIPS_EXPECTED_SECTIONS", str(DEFAULT_EXPECTED_SECTIONS)))
SQLTIPS_LOG_LEVEL = os.getenv("SQLTIPS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
