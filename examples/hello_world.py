"""
time_abstractions — Hello World

Depend on a clock, never on the system time. Wire the real clock in
production and a TestClock when you need to control time.
"""

from datetime import UTC, datetime, timedelta

from time_abstractions import (
    Clock,
    TestClock,
    UtcClock,
    calculate_interval_until,
    try_convert_to_utc_time_of_day,
)

# ─── Your code (only knows about the Clock protocol) ───


def minutes_until_backup(clock: Clock, backup_time: datetime) -> float:
    return calculate_interval_until(clock.get_time(), backup_time).total_seconds() / 60


def main():
    # ──────────────────────────────────────
    #  1. Build a time of day from a span
    # ──────────────────────────────────────
    converted, backup_time = try_convert_to_utc_time_of_day(timedelta(hours=4, minutes=15))
    if not converted:
        raise SystemExit("invalid backup time")

    # ──────────────────────────────────────
    #  2. Production wiring
    # ──────────────────────────────────────
    print("=== Real clock ===\n")
    print(f"  Minutes until backup: {minutes_until_backup(UtcClock(), backup_time):.1f}")

    # ──────────────────────────────────────
    #  3. Fixed time, advanced by hand
    # ──────────────────────────────────────
    print("\n=== Fixed test clock ===\n")

    clock = TestClock(datetime(2021, 5, 30, 3, 0, tzinfo=UTC))
    print(f"  03:00 -> {minutes_until_backup(clock, backup_time):.0f} min")

    clock.advance_time(timedelta(hours=1, minutes=15))
    print(f"  04:15 -> {minutes_until_backup(clock, backup_time):.0f} min (next day)")

    # ──────────────────────────────────────
    #  4. Scripted time — each read moves on,
    #     the last value sticks
    # ──────────────────────────────────────
    print("\n=== Scripted test clock ===\n")

    start = datetime(2021, 5, 30, 4, 0, tzinfo=UTC)
    scripted = TestClock.scripted([start, start + timedelta(minutes=10)])
    for i in range(3):
        print(f"  Read #{i + 1}: {minutes_until_backup(scripted, backup_time):.0f} min")


if __name__ == "__main__":
    main()
