# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for answering interval requests.

Orchestrates the flow:
1. Convert the requested span into a time of day
2. Resolve "now" from the request or the injected clock
3. Run the interval helper selected by the request mode
4. Return structured result
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from time_abstractions._internal.zones import disposition_of, to_utc
from time_abstractions.clocks.system import UtcClock
from time_abstractions.intervals import (
    calculate_interval_for_same_time,
    calculate_interval_for_same_time_next_day,
    calculate_interval_until,
    try_convert_to_time_of_day,
    try_convert_to_utc_time_of_day,
)

from .schema import IntervalRequest, IntervalResponse

if TYPE_CHECKING:
    from time_abstractions.clocks.base import Clock

logger = logging.getLogger(__name__)

_CALCULATORS: dict[str, Callable[[datetime, datetime], timedelta]] = {
    "next_day": calculate_interval_for_same_time_next_day,
    "same_time": calculate_interval_for_same_time,
    "until": calculate_interval_until,
}


class TimeOfDayError(Exception):
    """Raised when the requested span is not a valid time of day."""

    pass


class Executor:
    """Answers :class:`IntervalRequest` objects.

    The executor is designed for dependency injection to support testing.
    Pass a :class:`~time_abstractions.clocks.testing.TestClock` to control
    the reference time of requests that omit ``now``.

    Example:
        executor = Executor()
        output = executor.execute(IntervalRequest(time_of_day="04:15:00"))
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or UtcClock()

    def execute(self, request: IntervalRequest) -> IntervalResponse:
        """Compute the interval, translating every failure into a response.

        Note:
            This method catches all exceptions and returns them as
            IntervalResponse errors, ensuring valid JSON is always returned.
        """
        try:
            return self._execute_internal(request)
        except TimeOfDayError as e:
            return IntervalResponse(
                success=False,
                error=str(e),
                error_type="TimeOfDayError",
            )
        except Exception as e:
            logger.exception("Interval request failed")
            return IntervalResponse(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )

    def _execute_internal(self, request: IntervalRequest) -> IntervalResponse:
        time_of_day = self._to_time_of_day(request)
        now = request.now if request.now is not None else self._clock.get_time()

        interval = _CALCULATORS[request.mode](now, time_of_day)
        logger.debug("Interval from %s until %s (%s): %s", now, time_of_day.time(), request.mode, interval)

        return IntervalResponse(
            success=True,
            interval_seconds=interval.total_seconds(),
            next_occurrence=to_utc(now) + interval,
            metadata={
                "mode": request.mode,
                "disposition": str(disposition_of(time_of_day)),
            },
        )

    @staticmethod
    def _to_time_of_day(request: IntervalRequest) -> datetime:
        convert = try_convert_to_utc_time_of_day if request.utc else try_convert_to_time_of_day
        converted, time_of_day = convert(request.time_of_day)
        if not converted:
            raise TimeOfDayError(f"Not a valid time of day: {request.time_of_day}")
        return time_of_day
