"""DailyJob — runs a task at the same time every day."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import TYPE_CHECKING

from time_abstractions.exceptions import NullArgumentError
from time_abstractions.intervals import calculate_interval_for_same_time_next_day

if TYPE_CHECKING:
    from datetime import datetime

    from time_abstractions.clocks.base import Clock

logger = logging.getLogger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class DailyJob(ABC):
    """Executes :meth:`execute` at the same time of day, every day.

    Subclass it and override :meth:`execute`.  :meth:`start` arms a one-shot
    timer for the next day's occurrence of :attr:`start_time`; each time it
    fires the job runs and the timer is re-armed for the following day.

    Parameters:
        start_time:    Time of day at which the job runs.  Its date is ignored.
        clock:         Source of the current time.
        timer_factory: Builds the one-shot timer from ``(seconds, callback)``.
                       Defaults to :class:`threading.Timer`.

    Raises:
        NullArgumentError: If *clock* is ``None``.
    """

    def __init__(
        self,
        start_time: datetime,
        clock: Clock,
        *,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        if clock is None:
            raise NullArgumentError("clock")
        self.start_time = start_time
        self._clock = clock
        self._timer_factory = timer_factory
        self._timer: threading.Timer | None = None
        self._running = False
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._running

    # ── lifecycle ────────────────────────────────────────────

    def start(self) -> None:
        """Start the job.  It executes on the next day for the first time."""
        self._arm(require_running=False)

    def _arm(self, *, require_running: bool) -> None:
        with self._lock:
            if require_running and not self._running:
                return
            interval = calculate_interval_for_same_time_next_day(self._clock.get_time(), self.start_time)
            if self._timer is not None:
                self._timer.cancel()
            timer = self._timer_factory(interval.total_seconds(), self._on_timer_tick)
            timer.daemon = True
            self._timer = timer
            self._running = True
            timer.start()
        logger.info("Daily job %s armed, next run in %s", type(self).__name__, interval)

    def stop(self) -> None:
        """Stop the job.  A run that is already in progress is not interrupted."""
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.info("Daily job %s stopped", type(self).__name__)

    def close(self) -> None:
        """Dispose of the internal timer."""
        self.stop()

    def __enter__(self) -> DailyJob:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ── execution ────────────────────────────────────────────

    @abstractmethod
    def execute(self) -> None:
        """Run the job immediately."""
        ...

    def _on_timer_tick(self) -> None:
        logger.debug("Daily job %s triggered", type(self).__name__)
        try:
            self.execute()
        except Exception:
            logger.exception("Daily job %s failed", type(self).__name__)
            raise
        finally:
            self._arm(require_running=True)
