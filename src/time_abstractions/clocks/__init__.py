"""Clock implementations."""

from time_abstractions.clocks.base import Clock
from time_abstractions.clocks.system import LocalClock, UtcClock
from time_abstractions.clocks.testing import TestClock

__all__ = [
    "Clock",
    "LocalClock",
    "TestClock",
    "UtcClock",
]
