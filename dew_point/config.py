"""Centralized configuration for the dew point calculator.

This module keeps all tunable values and environment overrides in one place so
the rest of the code can import a single source of truth.  Every setting has a
brief description so the command-line behaviour is easy to reason about.
"""

from __future__ import annotations

import os
from typing import Mapping

# --- Program ----------------------------------------------------------------

#: Name used in usage lines and diagnostics.
PROG = "dewpoint"

# --- Magnus formula ---------------------------------------------------------

#: Magnus coefficients over water (Alduchov & Eskridge), as recommended by
#: Lawrence, "The Relationship Between Relative Humidity and the Dewpoint
#: Temperature in Moist Air", BAMS 86(2), 2005.
MAGNUS_A = 17.625
MAGNUS_B = 243.04

# --- Locale -----------------------------------------------------------------

#: ISO 3166 territories whose measurement convention uses Fahrenheit.
FAHRENHEIT_TERRITORIES = frozenset(
    {
        "US",  # United States
        "LR",  # Liberia
        "FM",  # Micronesia
        "KY",  # Cayman Islands
        "MH",  # Marshall Islands
        "PW",  # Palau
    }
)
#: Environment variables consulted, in order, for the measurement locale.
LOCALE_ENV_VARS = ("LC_ALL", "LC_MEASUREMENT", "LANG")
#: Locale assumed when none of the variables above is set.
DEFAULT_LOCALE = "C"

# --- Logging ----------------------------------------------------------------

LOG_LEVEL = os.environ.get("DEW_POINT_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def measurement_locale(environ: Mapping[str, str] | None = None) -> str:
    """Resolve the locale governing LC_MEASUREMENT from the environment."""
    if environ is None:
        environ = os.environ
    for name in LOCALE_ENV_VARS:
        value = environ.get(name)
        if value:
            return value
    return DEFAULT_LOCALE
