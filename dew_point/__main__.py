"""Dew point calculator entrypoint.

Usage: python -m dew_point TEMPERATURE HUMIDITY
"""

from dew_point.cli import run

run()
