"""
Camera Capture Session

OpenCV VideoCapture wrapper with an explicit open/configure/close
lifecycle. One session owns one camera handle.
"""

import logging
from typing import Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)


class CameraUnavailableError(RuntimeError):
    """Raised when the camera device cannot be opened."""


class FrameCaptureError(RuntimeError):
    """Raised when the camera fails to deliver a frame."""


class CaptureSession:
    """
    Owns a single OpenCV camera handle.

    Usage:
        session = CaptureSession(camera_index=0)
        session.open()
        session.configure(640, 480)
        frame = session.read()
        session.close()

        # or
        with CaptureSession(0) as session:
            frame = session.read()
    """

    def __init__(self, camera_index: int = 0):
        """
        Initialize the capture session.

        Args:
            camera_index: Camera index (0 = default webcam)
        """
        self.camera_index = camera_index
        self._cap: Optional[cv2.VideoCapture] = None

    @property
    def is_open(self) -> bool:
        """Check if the camera handle is open."""
        return self._cap is not None and self._cap.isOpened()

    def open(self) -> None:
        """
        Open the camera device.

        Raises:
            CameraUnavailableError: If the device cannot be opened
        """
        if self.is_open:
            return

        cap = cv2.VideoCapture(self.camera_index)
        if not cap.isOpened():
            cap.release()
            raise CameraUnavailableError(f"Cannot open camera: {self.camera_index}")

        self._cap = cap
        logger.debug("Opened camera %s", self.camera_index)

    def configure(self, width: int, height: int) -> None:
        """
        Request a capture resolution.

        Args:
            width: Frame width in pixels
            height: Frame height in pixels
        """
        cap = self._require_open()
        logger.info("w:%i, h:%i", width, height)
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

    def read(self) -> np.ndarray:
        """
        Grab the next frame.

        Returns:
            BGR numpy array

        Raises:
            FrameCaptureError: If the camera returns no frame
        """
        ret, frame = self._require_open().read()
        if not ret or frame is None:
            raise FrameCaptureError(f"Frame capture failed on camera {self.camera_index}")
        return frame

    def close(self) -> None:
        """Release the camera device. Safe to call more than once."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logger.debug("Released camera %s", self.camera_index)

    def _require_open(self) -> cv2.VideoCapture:
        if self._cap is None:
            raise RuntimeError("Capture session is not open")
        return self._cap

    def __enter__(self) -> "CaptureSession":
        self.open()
        return self

    def __exit__(self, *_) -> None:
        self.close()
