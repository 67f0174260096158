"""Tests for configuration and logging setup."""

import logging

import pytest

from dew_point.config import measurement_locale
from dew_point.logs import configure_logging


class TestMeasurementLocale:
    """LC_ALL > LC_MEASUREMENT > LANG > C."""

    def test_defaults_to_c(self):
        assert measurement_locale({}) == "C"

    def test_lang(self):
        assert measurement_locale({"LANG": "en_US.UTF-8"}) == "en_US.UTF-8"

    def test_lc_measurement_beats_lang(self):
        environ = {"LANG": "en_US.UTF-8", "LC_MEASUREMENT": "en_GB.UTF-8"}
        assert measurement_locale(environ) == "en_GB.UTF-8"

    def test_lc_all_beats_everything(self):
        environ = {
            "LANG": "en_GB.UTF-8",
            "LC_MEASUREMENT": "en_GB.UTF-8",
            "LC_ALL": "en_LR.UTF-8",
        }
        assert measurement_locale(environ) == "en_LR.UTF-8"

    def test_empty_values_are_skipped(self):
        environ = {"LC_ALL": "", "LC_MEASUREMENT": "", "LANG": "en_PW.UTF-8"}
        assert measurement_locale(environ) == "en_PW.UTF-8"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.delenv("LC_MEASUREMENT", raising=False)
        monkeypatch.setenv("LANG", "en_KY.UTF-8")
        assert measurement_locale() == "en_KY.UTF-8"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_level(self):
        logger = logging.getLogger("dew_point")
        level = logger.level
        yield
        logger.setLevel(level)

    def test_named_level(self):
        assert configure_logging("debug") == logging.DEBUG
        assert logging.getLogger("dew_point").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        assert configure_logging("chatty") == logging.WARNING
