"""
Unit tests for TraceConfig.
"""

import pytest

from calltree.config import DURATION_UNIT_ENV, ENTRY_TIME_UNIT_ENV, TraceConfig


class TestTraceConfig:
    """Test cases for TraceConfig."""

    def test_defaults(self):
        """Test the default millisecond entry time and nanosecond durations."""
        config = TraceConfig()

        assert config.entry_time_unit_nanos == 1_000_000
        assert config.duration_unit_nanos == 1

    @pytest.mark.parametrize("kwargs", [
        {"entry_time_unit_nanos": 0},
        {"duration_unit_nanos": -5},
    ])
    def test_non_positive_units_rejected(self, kwargs):
        """Test validation of unit values."""
        with pytest.raises(ValueError):
            TraceConfig(**kwargs)

    def test_from_env(self, monkeypatch):
        """Test reading units from environment variables."""
        monkeypatch.setenv(ENTRY_TIME_UNIT_ENV, "1000")
        monkeypatch.delenv(DURATION_UNIT_ENV, raising=False)

        config = TraceConfig.from_env()

        assert config.entry_time_unit_nanos == 1000
        assert config.duration_unit_nanos == 1

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_from_env_invalid(self, monkeypatch, value):
        """Test that malformed environment values raise."""
        monkeypatch.setenv(DURATION_UNIT_ENV, value)

        with pytest.raises(ValueError):
            TraceConfig.from_env()
