# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m time_abstractions.runner``.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field

IntervalMode = Literal["next_day", "same_time", "until"]


class IntervalRequest(BaseModel):
    """Question: how long until the next occurrence of a time of day?

    Attributes:
        time_of_day: Target wall time as a span since midnight, e.g.
                     ``"04:15:00"`` or ``15300`` (seconds).  The days part
                     is ignored; negative spans are rejected
        mode: Which interval helper answers the request
        now: Reference time; read from the executor's clock when omitted.
             Naive values are interpreted as local time
        utc: Interpret ``time_of_day`` as UTC instead of local time
    """

    time_of_day: timedelta
    mode: IntervalMode = "until"
    now: datetime | None = None
    utc: bool = False


class IntervalResponse(BaseModel):
    """Answer written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether the interval could be computed
        interval_seconds: Seconds until the next occurrence (on success)
        next_occurrence: ``now`` (in UTC) plus ``interval_seconds`` (on success).
                         In ``same_time`` mode a same-day interval is a
                         wall-clock difference, so across a daylight saving
                         switch this is off by the size of the switch
        error: Error message (on failure)
        error_type: Error class name (on failure)
        metadata: Mode and disposition the answer was computed with
    """

    success: bool
    interval_seconds: float | None = None
    next_occurrence: datetime | None = None
    error: str = ""
    error_type: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)
