"""
Live preview window backed by OpenCV highgui.
"""

import cv2
import numpy as np

from config import PREVIEW_SETTINGS


class PreviewWindow:
    """
    A single named OpenCV window showing the latest captured frame.

    Usage:
        preview = PreviewWindow()
        preview.open()
        if preview.show(frame):
            ...  # a key was pressed
        preview.close()
    """

    def __init__(
        self,
        window_name: str = PREVIEW_SETTINGS.window_name,
        wait_ms: int = PREVIEW_SETTINGS.wait_ms
    ):
        self.window_name = window_name
        self.wait_ms = wait_ms
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    def open(self) -> None:
        """Create the window."""
        if not self._is_open:
            cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
            self._is_open = True

    def show(self, frame: np.ndarray) -> bool:
        """
        Display a frame and poll the keyboard.

        Args:
            frame: BGR numpy array

        Returns:
            True if a key was pressed while polling
        """
        self.open()
        cv2.imshow(self.window_name, frame)
        return cv2.waitKey(self.wait_ms) >= 0

    def close(self) -> None:
        """Destroy the window."""
        if self._is_open:
            cv2.destroyWindow(self.window_name)
            self._is_open = False
