"""Tests for resolving EventsConfig from Django settings.

Run with: pytest tests/test_conf.py -v
"""

from datetime import timedelta
from zoneinfo import ZoneInfo

import pytest
from django.core.exceptions import ImproperlyConfigured

from scheduled_events.conf import DEFAULT_HAPPENING_MARGIN, EventsConfig


class TestEventsConfig:
    """Tests for EventsConfig.from_settings."""

    def test_reads_project_settings(self):
        config = EventsConfig.from_settings()
        assert config.default_timezone == ZoneInfo("Europe/Madrid")
        assert config.happening_margin == timedelta(minutes=10)

    def test_margin_in_seconds(self, settings):
        settings.SCHEDULED_EVENTS_HAPPENING_MARGIN = 90
        assert EventsConfig.from_settings().happening_margin == timedelta(seconds=90)

    def test_defaults(self, settings):
        del settings.SCHEDULED_EVENTS_DEFAULT_TIMEZONE
        del settings.SCHEDULED_EVENTS_HAPPENING_MARGIN
        settings.TIME_ZONE = "America/New_York"

        config = EventsConfig.from_settings()

        assert config.default_timezone == ZoneInfo("America/New_York")
        assert config.happening_margin == DEFAULT_HAPPENING_MARGIN

    @pytest.mark.parametrize("tz_name", ["Mars/Olympus_Mons", None, 3600])
    def test_invalid_timezone(self, settings, tz_name):
        settings.SCHEDULED_EVENTS_DEFAULT_TIMEZONE = tz_name
        with pytest.raises(ImproperlyConfigured):
            EventsConfig.from_settings()

    @pytest.mark.parametrize("margin", [-1, timedelta(minutes=-5), "30m", True])
    def test_invalid_margin(self, settings, margin):
        settings.SCHEDULED_EVENTS_HAPPENING_MARGIN = margin
        with pytest.raises(ImproperlyConfigured):
            EventsConfig.from_settings()

    def test_direct_construction_rejects_negative_margin(self):
        with pytest.raises(ValueError):
            EventsConfig(default_timezone=ZoneInfo("UTC"), happening_margin=timedelta(seconds=-1))
