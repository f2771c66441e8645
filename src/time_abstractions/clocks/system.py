"""Clocks backed by the real system time."""

from __future__ import annotations

from datetime import UTC, datetime

from time_abstractions._internal.zones import local_timezone


class LocalClock:
    """Returns the current local wall-clock time.

    The zone is the configured ``local_timezone`` setting, or the host's
    local zone when none is configured.
    """

    def get_time(self) -> datetime:
        return datetime.now(local_timezone())


class UtcClock:
    """Returns the current UTC time.

    UTC is a continuous timeline without daylight saving switches, which
    makes this the clock to prefer in applications.
    """

    def get_time(self) -> datetime:
        return datetime.now(UTC)
