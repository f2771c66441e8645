"""Disposition tags and zone resolution for ``datetime`` values.

A ``datetime`` carries its disposition in ``tzinfo``:

* ``UTC`` – ``tzinfo`` is ``datetime.UTC`` (or dateutil's ``tzutc``).
* ``LOCAL`` – any other ``tzinfo``; :func:`local_timezone` is the canonical one.
* ``UNSPECIFIED`` – naive; interpreted as local time when an absolute
  instant is needed.
"""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from enum import StrEnum
from zoneinfo import ZoneInfo

from dateutil import tz

from time_abstractions.config import get_settings


class Disposition(StrEnum):
    LOCAL = "local"
    UTC = "utc"
    UNSPECIFIED = "unspecified"


def local_timezone() -> tzinfo:
    """Return the configured local zone, falling back to the host's."""
    name = get_settings().local_timezone
    if name:
        return ZoneInfo(name)
    return tz.tzlocal()


def is_utc(zone: tzinfo | None) -> bool:
    return zone is UTC or isinstance(zone, tz.tzutc)


def disposition_of(value: datetime) -> Disposition:
    if value.tzinfo is None:
        return Disposition.UNSPECIFIED
    if is_utc(value.tzinfo):
        return Disposition.UTC
    return Disposition.LOCAL


def timezone_for(disposition: Disposition) -> tzinfo | None:
    """Map a disposition to the ``tzinfo`` that new values should carry."""
    if disposition is Disposition.UTC:
        return UTC
    if disposition is Disposition.LOCAL:
        return local_timezone()
    return None


def to_utc(value: datetime) -> datetime:
    """Convert *value* to a UTC datetime denoting the same absolute instant."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=local_timezone())
    return value.astimezone(UTC)
