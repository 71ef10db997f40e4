"""
Filename-safe timestamps for dumped frames.
"""

from datetime import datetime
from typing import Optional


def timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a local date and time down to milliseconds.

    The result only contains digits, "-" and "_", so it can be used
    directly as a path component, e.g. "2024-03-07_09-05-02-007".

    Args:
        now: Instant to format (default: current local time)

    Returns:
        Timestamp string in the form YYYY-MM-DD_HH-MM-SS-mmm
    """
    if now is None:
        now = datetime.now()
    milliseconds = now.microsecond // 1000
    return f"{now:%Y-%m-%d_%H-%M-%S}-{milliseconds:03d}"
