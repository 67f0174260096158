"""Default temperature scale inferred from the measurement locale."""

from __future__ import annotations

from .config import FAHRENHEIT_TERRITORIES


def locale_territory(locale: str) -> str | None:
    """Return the TERRITORY part of ``language_TERRITORY.encoding``, if any."""
    underscore = locale.find("_")
    dot = locale.find(".")
    if underscore < 0 or dot < 0 or dot <= underscore:
        return None
    return locale[underscore + 1 : dot]


def locale_uses_fahrenheit(locale: str) -> bool:
    return locale_territory(locale) in FAHRENHEIT_TERRITORIES


def scale_name(fahrenheit: bool) -> str:
    return "Fahrenheit" if fahrenheit else "Celsius"
