"""Shared test fixtures."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from time_abstractions.config import get_settings

BERLIN = ZoneInfo("Europe/Berlin")


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def berlin(monkeypatch):
    """Pin local time to a zone that switches to summer time at the end of March."""
    monkeypatch.setenv("TIME_ABSTRACTIONS_LOCAL_TIMEZONE", "Europe/Berlin")
    get_settings.cache_clear()
    return BERLIN


@pytest.fixture
def reference_time():
    return datetime(2021, 5, 30, 11, 15, 0, tzinfo=UTC)
