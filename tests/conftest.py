"""Pytest configuration and shared fixtures."""

from zoneinfo import ZoneInfo

import pytest

from scheduled_events.clock import FixedClock
from scheduled_events.conf import EventsConfig
from tests.factories import MARGIN, NOW
from tests.fakes import InMemoryConfirmStore, InMemoryEventStore


@pytest.fixture
def config() -> EventsConfig:
    return EventsConfig(default_timezone=ZoneInfo("Europe/Madrid"), happening_margin=MARGIN)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def confirm_store() -> InMemoryConfirmStore:
    return InMemoryConfirmStore()
