"""
Elapsed Timer - Wall-clock stopwatch used for frame rate reporting.

Measures the time since construction or the last reset with
microsecond resolution.
"""

import time


class ElapsedTimer:
    """
    Wall-clock stopwatch.

    The reference point is the system time-of-day clock, not a monotonic
    one. If the clock is adjusted backward while measuring, the reported
    value can be negative; that is returned as is.

    Usage:
        timer = ElapsedTimer()
        do_work()
        seconds = timer.elapsed_seconds()
        timer.reset()
    """

    def __init__(self):
        self.start: tuple[int, int] = (0, 0)
        self.reset()

    @staticmethod
    def _now() -> tuple[int, int]:
        """Current wall-clock time as (seconds, microseconds)."""
        return divmod(time.time_ns() // 1000, 1_000_000)

    def reset(self) -> None:
        """Capture the current wall-clock time as the new reference point."""
        self.start = self._now()

    def elapsed_seconds(self) -> float:
        """
        Get the time since construction or the last reset.

        Returns:
            Elapsed time in fractional seconds
        """
        now_s, now_us = self._now()
        ref_s, ref_us = self.start
        return (now_s - ref_s) + (now_us - ref_us) / 1_000_000
