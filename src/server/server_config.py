"""Configuration for the API server."""

from __future__ import annotations

import os

DEFAULT_MAX_CONTENT_SIZE = 1_000_000

# Largest inline markdown body accepted by the API, in characters.
MAX_CONTENT_SIZE = int(os.getenv("MAX_CONTENT_SIZE", str(DEFAULT_MAX_CONTENT_SIZE)))
