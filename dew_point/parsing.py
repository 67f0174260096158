"""Strict conversion of command-line text to numbers."""

from __future__ import annotations

import logging
import math

from .errors import InvalidHumidityError, InvalidTemperatureError

LOGGER = logging.getLogger("dew_point.parsing")


def read_float(text: str) -> float | None:
    """Parse ``text`` as a whole floating-point literal.

    Leading whitespace is allowed; anything left over after the number is not.
    Hexadecimal literals such as ``0x1.8p3`` are accepted.  Returns None for
    empty, malformed or non-finite input.
    """
    if not text or not text.isascii() or text != text.rstrip() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        if not text.strip().lstrip("+-").lower().startswith("0x"):
            return None
        try:
            value = float.fromhex(text)
        except (ValueError, OverflowError):
            return None
    if not math.isfinite(value):
        return None
    return value


def parse_temperature(text: str) -> float:
    value = read_float(text)
    if value is None:
        LOGGER.debug("Rejected temperature %r", text)
        raise InvalidTemperatureError(text)
    return value


def parse_humidity(text: str) -> float:
    """Humidity is a percentage; it must parse and be strictly positive."""
    value = read_float(text)
    if value is None or value <= 0.0:
        LOGGER.debug("Rejected humidity %r", text)
        raise InvalidHumidityError(text)
    return value
