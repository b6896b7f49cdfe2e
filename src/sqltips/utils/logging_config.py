"""Logging setup shared by the CLI and the API server."""

from __future__ import annotations

import logging
import sys

from sqltips.config import SQLTIPS_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return base
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{fields}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the ``sqltips`` and ``server`` loggers.

    Calling it again replaces the handler instead of stacking a new one.

    Raises:
        ValueError: If ``level`` (or ``SQLTIPS_LOG_LEVEL``) names no logging level.
    """
    resolved = level if level is not None else SQLTIPS_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
        if not isinstance(logging.getLevelName(resolved), int):
            raise ValueError(f"Unknown log level: {resolved!r}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(_LOG_FORMAT))

    for name in ("sqltips", "server"):
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            if isinstance(existing.formatter, ExtraFieldsFormatter):
                logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(resolved)
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
