"""
Bounded Frame Buffer

Holds captured frames together with the filenames they will be
written to. Frames are kept in capture order; there is no wraparound
and no eviction.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

import numpy as np


class BufferFullError(IndexError):
    """Raised when pushing into a buffer that already holds `capacity` frames."""


@dataclass
class FrameSlot:
    """A captured frame paired with its output filename."""
    frame: np.ndarray
    filename: Path
    index: int = 0


class FrameBuffer:
    """
    Fixed-capacity buffer of frame/filename pairs.

    Storage is allocated on the first push. Slots are filled from index 0
    in capture order until the buffer is full.

    Usage:
        buffer = FrameBuffer(capacity=100)

        while not buffer.is_full:
            buffer.push(frame, filename)

        for slot in buffer:
            write(slot.frame, slot.filename)
    """

    def __init__(self, capacity: int = 100):
        """
        Initialize the frame buffer.

        Args:
            capacity: Maximum number of frames to hold
        """
        if capacity < 1:
            raise ValueError(f"Buffer capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: Optional[list[FrameSlot]] = None

    def push(self, frame: np.ndarray, filename: Path) -> FrameSlot:
        """
        Store a frame in the next free slot.

        Args:
            frame: BGR numpy array from OpenCV
            filename: Path the frame will be written to

        Returns:
            The filled FrameSlot

        Raises:
            BufferFullError: If the buffer already holds `capacity` frames
        """
        if self._slots is None:
            self._slots = []
        if len(self._slots) >= self.capacity:
            raise BufferFullError(f"Frame buffer is full ({self.capacity} frames)")

        slot = FrameSlot(frame=frame, filename=Path(filename), index=len(self._slots))
        self._slots.append(slot)
        return slot

    def get_slot(self, index: int) -> Optional[FrameSlot]:
        """
        Get a slot by capture index.

        Args:
            index: Capture index (0 = first frame)

        Returns:
            FrameSlot or None if index out of range
        """
        if 0 <= index < self.size:
            return self._slots[index]
        return None

    def clear(self) -> None:
        """Release all frames and return to the unallocated state."""
        self._slots = None

    def __iter__(self) -> Iterator[FrameSlot]:
        return iter(self._slots or [])

    def __len__(self) -> int:
        return self.size

    @property
    def size(self) -> int:
        """Number of frames currently in the buffer."""
        return len(self._slots) if self._slots is not None else 0

    @property
    def is_allocated(self) -> bool:
        """Check if storage has been allocated by a first push."""
        return self._slots is not None

    @property
    def is_full(self) -> bool:
        """Check if buffer is at capacity."""
        return self.size >= self.capacity
