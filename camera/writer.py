"""
Frame Writer

Encodes frames to image files, optionally burning a text overlay
into the image first.
"""

from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from config import OVERLAY_SETTINGS, OverlaySettings


class FrameWriteError(IOError):
    """Raised when OpenCV fails to encode or write an image."""


class FrameWriter:
    """
    Writes single frames to disk with OpenCV.

    Usage:
        writer = FrameWriter()
        writer.write(frame, "/tmp/2024-03-07_09-05-02-007.png",
                     overlay_text="/tmp/2024-03-07_09-05-02-007.png")
    """

    def __init__(self, overlay: OverlaySettings = OVERLAY_SETTINGS):
        self.overlay = overlay

    def annotate(self, frame: np.ndarray, text: str) -> np.ndarray:
        """
        Draw text onto the frame in place.

        Args:
            frame: BGR numpy array
            text: Text to draw

        Returns:
            The same frame, for chaining
        """
        cv2.putText(
            frame,
            text,
            self.overlay.origin,
            cv2.FONT_HERSHEY_PLAIN,
            self.overlay.font_scale,
            self.overlay.color,
            self.overlay.thickness
        )
        return frame

    def write(
        self,
        frame: np.ndarray,
        path: str | Path,
        overlay_text: Optional[str] = None
    ) -> Path:
        """
        Encode a frame to an image file.

        The format is taken from the file extension. The overlay is drawn
        on a copy; the caller's frame is left untouched.

        Args:
            frame: BGR numpy array
            path: Output file path
            overlay_text: Optional text to burn into the image

        Returns:
            Path of the written file

        Raises:
            FrameWriteError: If OpenCV has no encoder for the extension or
                reports a failed write
        """
        path = Path(path)
        if overlay_text:
            frame = self.annotate(frame.copy(), overlay_text)

        try:
            written = cv2.imwrite(str(path), frame)
        except cv2.error as e:
            raise FrameWriteError(f"Cannot encode image: {path}") from e
        if not written:
            raise FrameWriteError(f"Failed to write image: {path}")
        return path
