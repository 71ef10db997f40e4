"""
CamDumper Engine

Timing utilities and the capture/write-out loop.
"""

from engine.timer import ElapsedTimer
from engine.timestamp import timestamp
from engine.dumper import FrameDumper

__all__ = [
    "ElapsedTimer",
    "timestamp",
    "FrameDumper",
]
