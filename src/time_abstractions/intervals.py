"""Interval and time-of-day helpers.

A *time of day* is a ``datetime`` on the sentinel date ``0001-01-01``; only
its hour, minute, second, millisecond and ``tzinfo`` are meaningful.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from time_abstractions._internal.zones import Disposition, local_timezone, timezone_for, to_utc

_ONE_DAY = timedelta(days=1)
_ZERO = timedelta(0)


def _whole_milliseconds(microseconds: int) -> int:
    return microseconds - microseconds % 1000


def _to_zone_of(now: datetime, time_of_day: datetime) -> datetime:
    """Express *now* on the wall clock of *time_of_day*'s zone (same instant)."""
    zone = time_of_day.tzinfo
    if zone is None:
        if now.tzinfo is None:
            return now
        return now.astimezone(local_timezone()).replace(tzinfo=None)
    return to_utc(now).astimezone(zone)


def calculate_interval_for_same_time_next_day(now: datetime, time_of_day: datetime) -> timedelta:
    """Return the span from *now* until *time_of_day* on the following day.

    The date of *time_of_day* is ignored; its ``tzinfo`` becomes the zone of
    the target.  Both ends are converted to UTC before subtracting, so a
    daylight saving switch in between yields the real elapsed time (e.g.
    ``9:15`` instead of ``10:15`` across a spring-forward night).
    """
    tomorrow = now + _ONE_DAY
    target = datetime(
        tomorrow.year,
        tomorrow.month,
        tomorrow.day,
        time_of_day.hour,
        time_of_day.minute,
        time_of_day.second,
        _whole_milliseconds(time_of_day.microsecond),
        tzinfo=time_of_day.tzinfo,
    )
    return to_utc(target) - to_utc(now)


def calculate_interval_for_same_time(now: datetime, time_of_day: datetime) -> timedelta:
    """Return the span from *now* until the day time is *time_of_day* again.

    Today's occurrence is compared on the wall clock of *now* (no DST
    correction).  If it is not strictly later than *now*, the next-day
    interval is returned instead, so an exact match yields 24 hours.
    """
    time_of_today = now.replace(
        hour=time_of_day.hour,
        minute=time_of_day.minute,
        second=time_of_day.second,
        microsecond=0,
    )
    if time_of_today > now:
        return time_of_today - now
    return calculate_interval_for_same_time_next_day(now, time_of_day)


def calculate_interval_until(now: datetime, time_of_day: datetime) -> timedelta:
    """Return the span until the next occurrence of *time_of_day* after *now*.

    The next occurrence is always strictly in the future: when *now* is
    exactly *time_of_day* the result is a full day rather than zero.  Unlike
    :func:`calculate_interval_for_same_time`, milliseconds are honoured and
    the same-day span is measured between absolute instants.  "Today" is the
    date of *now* on the wall clock of *time_of_day*'s zone.
    """
    wall_now = _to_zone_of(now, time_of_day)
    time_of_today = datetime(
        wall_now.year,
        wall_now.month,
        wall_now.day,
        time_of_day.hour,
        time_of_day.minute,
        time_of_day.second,
        _whole_milliseconds(time_of_day.microsecond),
        tzinfo=time_of_day.tzinfo,
    )
    interval = to_utc(time_of_today) - to_utc(now)
    if interval > _ZERO:
        return interval
    return calculate_interval_for_same_time_next_day(wall_now, time_of_day)


def try_convert_to_time_of_day(
    time_span: timedelta,
    disposition: Disposition = Disposition.LOCAL,
) -> tuple[bool, datetime]:
    """Try to turn *time_span* into a time of day.

    The hours, minutes, seconds and milliseconds of the span are kept; its
    days are ignored.  Negative spans cannot be converted.

    Returns:
        ``(True, time_of_day)`` on success, ``(False, datetime.min)`` otherwise.
    """
    if time_span < _ZERO:
        return False, datetime.min

    hours, remainder = divmod(time_span.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    time_of_day = datetime(
        1,
        1,
        1,
        hours,
        minutes,
        seconds,
        _whole_milliseconds(time_span.microseconds),
        tzinfo=timezone_for(disposition),
    )
    return True, time_of_day


def try_convert_to_utc_time_of_day(time_span: timedelta) -> tuple[bool, datetime]:
    """Like :func:`try_convert_to_time_of_day`, with the UTC disposition."""
    return try_convert_to_time_of_day(time_span, Disposition.UTC)
