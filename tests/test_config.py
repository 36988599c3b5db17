"""Tests for settings and logging."""

import logging

from citytz.config import Settings
from citytz.utils.logger import setup_logger


class TestSettings:
    """Tests for environment driven settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        for name in ("CITIES_FILE", "LOCAL_TIMEZONE", "DEFAULT_TIME_FORMAT", "COORDINATE_TOLERANCE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.cities_file is None
        assert settings.local_timezone == "UTC"
        assert settings.default_time_format == "Y-m-d H:i:s"
        assert settings.coordinate_tolerance == 0.1

    def test_environment_overrides(self, monkeypatch):
        """Test environment variables are read case-insensitively."""
        monkeypatch.setenv("LOCAL_TIMEZONE", "Asia/Jakarta")
        monkeypatch.setenv("coordinate_tolerance", "0.5")

        settings = Settings(_env_file=None)

        assert settings.local_timezone == "Asia/Jakarta"
        assert settings.coordinate_tolerance == 0.5


class TestLogger:
    """Tests for logger setup."""

    def test_single_handler(self):
        """Test repeated setup does not stack handlers."""
        logger = setup_logger("citytz.tests.logger")
        setup_logger("citytz.tests.logger")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_level_override(self):
        """Test an explicit level wins over LOG_LEVEL."""
        logger = setup_logger("citytz.tests.debug", level="debug")

        assert logger.level == logging.DEBUG
