"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from bidiwrap.config import (
    BidiWrapSettings,
    FormatterConfig,
    LoggingConfig,
    OutputConfig,
    get_default_settings,
)
from bidiwrap.domain import Direction


class TestFormatterConfig:
    """Tests for FormatterConfig."""

    def test_defaults(self):
        """Defaults describe an LTR context with both guards on."""
        config = FormatterConfig()
        assert config.context_direction is Direction.LTR
        assert config.stereo_reset is True
        assert config.heuristic == "firststrong_ltr"

    def test_direction_from_string(self):
        """Direction values are accepted as strings."""
        assert FormatterConfig(context_direction="rtl").context_direction is Direction.RTL

    def test_heuristic_normalized(self):
        """Heuristic names are normalized before validation."""
        assert FormatterConfig(heuristic=" AnyRTL-LTR ").heuristic == "anyrtl_ltr"

    def test_invalid_values(self):
        """Unknown directions and heuristics are rejected."""
        with pytest.raises(ValidationError):
            FormatterConfig(context_direction="ttb")
        with pytest.raises(ValidationError):
            FormatterConfig(heuristic="majority")

    def test_frozen(self):
        """Formatter settings cannot change after creation."""
        config = FormatterConfig()
        with pytest.raises(ValidationError):
            config.stereo_reset = False  # type: ignore[misc]


class TestSettings:
    """Tests for the settings root."""

    def test_default_settings(self):
        """Default settings emit isolated Unicode output."""
        settings = get_default_settings()
        assert isinstance(settings, BidiWrapSettings)
        assert settings.output == OutputConfig()
        assert settings.output.isolate is True
        assert settings.output.html is False
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_level_normalized(self):
        """Log levels are upper-cased before validation."""
        config = LoggingConfig(log_level=" debug ", file_log_level="Info")
        assert config.log_level == "DEBUG"
        assert config.file_log_level == "INFO"

    def test_unknown_level(self):
        """Levels outside DEBUG/INFO/WARNING/ERROR are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="verbose")
        with pytest.raises(ValidationError):
            LoggingConfig(file_log_level="TRACE")
