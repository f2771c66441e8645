"""time_abstractions — injectable clocks and time-of-day arithmetic.

Depend on the :class:`Clock` protocol, wire :class:`UtcClock` or
:class:`LocalClock` in production and :class:`TestClock` in tests.
"""

from time_abstractions._internal.zones import Disposition
from time_abstractions.clocks import Clock, LocalClock, TestClock, UtcClock
from time_abstractions.exceptions import (
    InvalidArgumentError,
    NullArgumentError,
    TimeAbstractionsError,
)
from time_abstractions.intervals import (
    calculate_interval_for_same_time,
    calculate_interval_for_same_time_next_day,
    calculate_interval_until,
    try_convert_to_time_of_day,
    try_convert_to_utc_time_of_day,
)
from time_abstractions.jobs import DailyJob

__all__ = [
    "Clock",
    "DailyJob",
    "Disposition",
    "InvalidArgumentError",
    "LocalClock",
    "NullArgumentError",
    "TestClock",
    "TimeAbstractionsError",
    "UtcClock",
    "calculate_interval_for_same_time",
    "calculate_interval_for_same_time_next_day",
    "calculate_interval_until",
    "try_convert_to_time_of_day",
    "try_convert_to_utc_time_of_day",
]
