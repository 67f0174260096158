#!/usr/bin/env python3
"""Dew point calculator.

Features:
    * Approximates the dew point from an air temperature and relative humidity
      with the Magnus formula and prints it rounded to the nearest degree.
    * Reads temperatures in Celsius or Fahrenheit; the default follows the
      measurement locale (LC_ALL, LC_MEASUREMENT, LANG) and -c/-f override it.
    * Set DEW_POINT_LOG_LEVEL=DEBUG to trace locale and unit decisions on stderr.
"""

from dew_point.cli import run

if __name__ == "__main__":
    run()
