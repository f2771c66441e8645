"""Tests for calculate_interval_for_same_time and calculate_interval_until."""

from datetime import UTC, datetime, timedelta

import pytest

from time_abstractions import calculate_interval_for_same_time, calculate_interval_until


@pytest.fixture
def start_time(berlin):
    return datetime(1, 1, 1, 4, 15, 0, tzinfo=berlin)


UNTIL_CASES = [
    (datetime(2017, 10, 4, 4, 12, 0), timedelta(minutes=3)),
    (datetime(2017, 10, 4, 4, 16, 0), timedelta(hours=23, minutes=59)),
    (datetime(2016, 12, 31, 4, 15, 1), timedelta(hours=23, minutes=59, seconds=59)),
    (datetime(2017, 10, 4, 4, 15, 0), timedelta(hours=24)),
    (datetime(2017, 3, 25, 18, 0, 0), timedelta(hours=9, minutes=15)),
    (datetime(2017, 10, 28, 18, 0, 0), timedelta(hours=11, minutes=15)),
]


@pytest.mark.parametrize(("now", "expected"), UNTIL_CASES)
def test_interval_until(berlin, start_time, now, expected):
    assert calculate_interval_until(now.replace(tzinfo=berlin), start_time) == expected


def test_interval_until_exact_match_is_a_full_day():
    now = datetime(2021, 5, 30, 11, 15, 0, tzinfo=UTC)
    start_time = datetime(1, 1, 1, 11, 15, 0, tzinfo=UTC)
    assert calculate_interval_until(now, start_time) == timedelta(hours=24)


def test_interval_until_honours_milliseconds():
    now = datetime(2021, 5, 30, 11, 15, 0, tzinfo=UTC)
    start_time = datetime(1, 1, 1, 11, 15, 0, 500_000, tzinfo=UTC)
    assert calculate_interval_until(now, start_time) == timedelta(milliseconds=500)


@pytest.mark.parametrize(("now", "expected"), UNTIL_CASES)
def test_interval_for_same_time(berlin, start_time, now, expected):
    assert calculate_interval_for_same_time(now.replace(tzinfo=berlin), start_time) == expected


def test_same_time_compares_wall_clock(berlin):
    # 01:30 CET -> 03:30 CEST spans the skipped hour; the same-day check
    # measures wall-clock time only
    now = datetime(2017, 3, 26, 1, 30, 0, tzinfo=berlin)
    start_time = datetime(1, 1, 1, 3, 30, 0, tzinfo=berlin)

    assert calculate_interval_for_same_time(now, start_time) == timedelta(hours=2)
    assert calculate_interval_until(now, start_time) == timedelta(hours=1)


def test_same_time_ignores_milliseconds():
    now = datetime(2021, 5, 30, 11, 15, 0, tzinfo=UTC)
    start_time = datetime(1, 1, 1, 11, 15, 0, 500_000, tzinfo=UTC)
    # today's occurrence is truncated to 11:15:00, which is not later than now
    assert calculate_interval_for_same_time(now, start_time) == timedelta(hours=24, milliseconds=500)


def test_interval_until_targets_time_of_day_zone(berlin):
    # 03:00 UTC is 05:00 CEST, so today's 04:15 local has already passed
    now = datetime(2017, 7, 1, 3, 0, 0, tzinfo=UTC)
    start_time = datetime(1, 1, 1, 4, 15, 0, tzinfo=berlin)
    assert calculate_interval_until(now, start_time) == timedelta(hours=23, minutes=15)


def test_interval_until_later_today_in_time_of_day_zone(berlin):
    # 01:00 UTC is 03:00 CEST
    now = datetime(2017, 7, 1, 1, 0, 0, tzinfo=UTC)
    start_time = datetime(1, 1, 1, 4, 15, 0, tzinfo=berlin)
    assert calculate_interval_until(now, start_time) == timedelta(hours=1, minutes=15)


def test_interval_until_uses_local_date_across_midnight(berlin):
    # 22:30 UTC on July 1st is already 00:30 on July 2nd in Berlin
    now = datetime(2017, 7, 1, 22, 30, 0, tzinfo=UTC)
    start_time = datetime(1, 1, 1, 0, 15, 0, tzinfo=berlin)
    assert calculate_interval_until(now, start_time) == timedelta(hours=23, minutes=45)


def test_interval_until_utc_time_of_day_from_local_now(berlin):
    now = datetime(2017, 7, 1, 5, 0, 0, tzinfo=berlin)  # 03:00 UTC
    start_time = datetime(1, 1, 1, 4, 15, 0, tzinfo=UTC)
    assert calculate_interval_until(now, start_time) == timedelta(hours=1, minutes=15)


def test_interval_until_naive_time_of_day_from_utc_now(berlin):
    now = datetime(2017, 7, 1, 3, 0, 0, tzinfo=UTC)
    start_time = datetime(1, 1, 1, 4, 15, 0)
    assert calculate_interval_until(now, start_time) == timedelta(hours=23, minutes=15)
