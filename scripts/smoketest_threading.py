"""
Stress tests for thread-safety of the process-wide settings.

Note this isn't a unit test, because it changes global settings
while other threads read them.
"""

import sys
import time
from threading import Thread

from chronos import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    Moment,
    get_weekend_days,
    reset_settings,
    set_default_timezone,
    set_weekend_days,
)

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


NUM_THREADS = 16
NUM_ITERATIONS = 2_000
TIMEZONE_SAMPLE = [
    "UTC",
    "America/Guyana",
    "Etc/GMT-11",
    "Europe/Vienna",
    "Asia/Ulaanbaatar",
    "US/Alaska",
    "Pacific/Bougainville",
    "Africa/Monrovia",
    "Europe/Copenhagen",
    "Asia/Tashkent",
    "Europe/Tallinn",
]
WEEKENDS = [(SATURDAY, SUNDAY), (FRIDAY, SATURDAY), (SUNDAY,), (MONDAY, FRIDAY)]
assert len(TIMEZONE_SAMPLE) % NUM_THREADS, (
    "Timezone sample should not be evenly divisible by number of threads"
)
TZS = TIMEZONE_SAMPLE * (NUM_THREADS * NUM_ITERATIONS // len(TIMEZONE_SAMPLE))


def switch_default_timezone(tzs):
    """Change the default timezone while creating moments in it"""
    for tz in tzs:
        set_default_timezone(tz)
        m = Moment(2024, 6, 15, 12)
        del m


def switch_weekend(n):
    """Readers must only ever observe one of the complete weekend settings"""
    for i in range(NUM_ITERATIONS):
        set_weekend_days(WEEKENDS[(n + i) % len(WEEKENDS)])
        assert get_weekend_days() in WEEKENDS
        Moment(2024, 6, 15).is_weekend()


def main(func, args):
    print(f"Starting test: {func.__name__}")
    threads = []

    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=func, args=(args(n),))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    print(f"Execution time: {end_time - start_time:.2f} seconds")
    reset_settings()


if __name__ == "__main__":
    main(switch_default_timezone, lambda n: TZS[n::NUM_THREADS])
    main(switch_weekend, lambda n: n)
