"""Tests for TimeSettings and zone resolution."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from dateutil import tz

from time_abstractions import Disposition
from time_abstractions._internal.zones import (
    disposition_of,
    local_timezone,
    timezone_for,
    to_utc,
)
from time_abstractions.config import get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("TIME_ABSTRACTIONS_LOCAL_TIMEZONE", raising=False)
    monkeypatch.delenv("TIME_ABSTRACTIONS_LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.local_timezone is None
    assert settings.log_level == "INFO"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_env_override(monkeypatch):
    monkeypatch.setenv("TIME_ABSTRACTIONS_LOG_LEVEL", "DEBUG")
    assert get_settings().log_level == "DEBUG"


def test_configured_local_timezone(berlin):
    assert local_timezone() == ZoneInfo("Europe/Berlin")


def test_host_local_timezone_fallback(monkeypatch):
    monkeypatch.delenv("TIME_ABSTRACTIONS_LOCAL_TIMEZONE", raising=False)
    assert isinstance(local_timezone(), tz.tzlocal)


def test_disposition_of():
    assert disposition_of(datetime(2020, 1, 1)) is Disposition.UNSPECIFIED
    assert disposition_of(datetime(2020, 1, 1, tzinfo=UTC)) is Disposition.UTC
    assert disposition_of(datetime(2020, 1, 1, tzinfo=tz.tzutc())) is Disposition.UTC
    assert disposition_of(datetime(2020, 1, 1, tzinfo=ZoneInfo("Europe/Berlin"))) is Disposition.LOCAL


def test_timezone_for(berlin):
    assert timezone_for(Disposition.UTC) is UTC
    assert timezone_for(Disposition.LOCAL) == berlin
    assert timezone_for(Disposition.UNSPECIFIED) is None


def test_to_utc_keeps_instant(berlin):
    summer = datetime(2017, 7, 1, 12, 0, tzinfo=berlin)
    assert to_utc(summer) == datetime(2017, 7, 1, 10, 0, tzinfo=UTC)
    assert to_utc(summer).tzinfo is UTC


def test_to_utc_treats_naive_as_local(berlin):
    assert to_utc(datetime(2017, 1, 1, 12, 0)) == datetime(2017, 1, 1, 11, 0, tzinfo=UTC)
