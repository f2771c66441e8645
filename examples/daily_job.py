"""
time_abstractions — Daily job

A job that runs every day at the same local time. Run it and leave it
open; press Ctrl+C to stop.
"""

import logging
import threading
from datetime import timedelta

from time_abstractions import DailyJob, LocalClock, try_convert_to_time_of_day
from time_abstractions.logging_config import configure_logging

logger = logging.getLogger("time_abstractions.examples")


class CleanupJob(DailyJob):
    def execute(self) -> None:
        logger.info("Removing stale files")


def main():
    configure_logging("DEBUG")

    converted, start_time = try_convert_to_time_of_day(timedelta(hours=3, minutes=30))
    if not converted:
        raise SystemExit("invalid start time")

    with CleanupJob(start_time, LocalClock()) as job:
        job.start()
        try:
            threading.Event().wait()
        except KeyboardInterrupt:
            pass


if __name__ == "__main__":
    main()
