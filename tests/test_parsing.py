"""Tests for strict numeric parsing of command-line operands."""

import pytest

from dew_point.errors import InvalidHumidityError, InvalidTemperatureError
from dew_point.parsing import parse_humidity, parse_temperature, read_float


class TestReadFloat:
    """Whole-string floating-point literals."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("21", 21.0),
            ("-5", -5.0),
            ("+3.5", 3.5),
            (".5", 0.5),
            ("1e2", 100.0),
            ("  42", 42.0),
            ("0x10", 16.0),
            ("0x1.8p3", 12.0),
        ],
    )
    def test_accepts_numeric_literals(self, text, expected):
        assert read_float(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "21C", "21 ", "1_000", "1,5", "0x", "--1", "inf", "nan", "1e999", "0x1p5000", "٢١"],
    )
    def test_rejects_anything_else(self, text):
        assert read_float(text) is None


class TestParseTemperature:
    def test_valid(self):
        assert parse_temperature("-12.5") == -12.5

    def test_invalid_names_the_text(self):
        with pytest.raises(InvalidTemperatureError) as excinfo:
            parse_temperature("abc")
        assert excinfo.value.value == "abc"
        assert excinfo.value.message == 'invalid temperature "abc"'


class TestParseHumidity:
    def test_valid(self):
        assert parse_humidity("55") == 55.0

    def test_above_one_hundred_is_allowed(self):
        assert parse_humidity("120") == 120.0

    @pytest.mark.parametrize("text", ["0", "-3", "0.0", "wet", ""])
    def test_invalid_or_non_positive(self, text):
        with pytest.raises(InvalidHumidityError) as excinfo:
            parse_humidity(text)
        assert excinfo.value.message == f'invalid humidity "{text}"'
