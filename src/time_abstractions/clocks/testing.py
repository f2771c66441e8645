"""TestClock — a controllable clock for deterministic tests."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from time_abstractions.exceptions import InvalidArgumentError, NullArgumentError

logger = logging.getLogger(__name__)


@dataclass
class _ScriptedSequence:
    """Finite list of times replayed in order, plus the read cursor."""

    times: tuple[datetime, ...]
    index: int = 0

    def next(self) -> datetime | None:
        if self.index >= len(self.times):
            return None
        value = self.times[self.index]
        self.index += 1
        return value


class TestClock:
    """Clock whose time is controlled programmatically.

    Three ways to build one:

    * ``TestClock()`` – starts at the current UTC time.
    * ``TestClock(t0)`` – starts at *t0* and stays there until advanced.
    * ``TestClock.scripted([a, b, c])`` – replays the given times.  The first
      one becomes :attr:`initial_time`; every :meth:`get_time` call returns the
      current value and then moves on to the next scripted one.  Once the
      script is exhausted the last value sticks.

    :meth:`advance_time` shifts the current value and can be mixed freely with
    a script: it does not consume or skip scripted entries, so a pending
    scripted value replaces the advanced one on the following read.

    Not thread-safe: serialize access when sharing an instance.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, initial_time: datetime | None = None) -> None:
        if initial_time is None:
            initial_time = datetime.now(UTC)
        self._initial_time = initial_time
        self._current_time = initial_time
        self._sequence: _ScriptedSequence | None = None

    @classmethod
    def scripted(cls, times: Iterable[datetime] | None) -> TestClock:
        """Build a clock that replays *times* in order.

        Raises:
            NullArgumentError:    If *times* is ``None``.
            InvalidArgumentError: If *times* is empty.
        """
        if times is None:
            raise NullArgumentError("times")
        sequence = _ScriptedSequence(tuple(times))
        first = sequence.next()
        if first is None:
            raise InvalidArgumentError("times", "at least one time must be scripted")

        clock = cls(first)
        clock._sequence = sequence
        logger.debug("Scripted test clock with %d time(s)", len(sequence.times))
        return clock

    @property
    def initial_time(self) -> datetime:
        """The time this clock was created with.  Never changes."""
        return self._initial_time

    def get_time(self) -> datetime:
        now = self._current_time
        if self._sequence is not None:
            upcoming = self._sequence.next()
            if upcoming is not None:
                self._current_time = upcoming
        return now

    def advance_time(self, delta: timedelta) -> TestClock:
        """Move the current time by *delta* (may be negative).  Returns ``self``."""
        self._current_time = self._current_time + delta
        return self
