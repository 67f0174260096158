"""Logging setup for diagnostics written to stderr."""

from __future__ import annotations

import logging

from .config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str | None = None) -> int:
    """Configure the root logger; unknown level names fall back to WARNING."""
    name = (level or LOG_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("dew_point").setLevel(resolved)
    return resolved
