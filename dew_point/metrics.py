"""Math helpers for dew point calculations."""

import math

from .config import MAGNUS_A, MAGNUS_B


def fahrenheit_to_celsius(temp_f: float) -> float:
    return 5.0 / 9.0 * (temp_f - 32.0)


def celsius_to_fahrenheit(temp_c: float) -> float:
    return 9.0 / 5.0 * temp_c + 32.0


def dew_point_c(temp_c: float, humidity: float) -> float:
    """Magnus approximation for dew point in Celsius.

    See equation 8 of Lawrence (2005), https://doi.org/10.1175/BAMS-86-2-225.
    ``humidity`` is a relative humidity percentage and must be positive.
    """
    gamma = math.log(humidity / 100.0) + (MAGNUS_A * temp_c / (MAGNUS_B + temp_c))
    return (MAGNUS_B * gamma) / (MAGNUS_A - gamma)


def dew_point_f(temp_f: float, humidity: float) -> float:
    """Dew point in Fahrenheit, computed in Celsius and converted back."""
    return celsius_to_fahrenheit(dew_point_c(fahrenheit_to_celsius(temp_f), humidity))
