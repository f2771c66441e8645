"""Clock abstraction for testable time-dependent logic."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime


class Clock(Protocol):
    """Protocol for getting the current time.  Inject a :class:`TestClock` in tests."""

    def get_time(self) -> datetime: ...
