"""
Tests for the CaptureSession camera wrapper.
"""

import pytest
import numpy as np
from unittest.mock import MagicMock, patch

import cv2

from camera.session import CaptureSession, CameraUnavailableError, FrameCaptureError


@pytest.fixture
def mock_capture():
    """Patch cv2.VideoCapture with an opened mock device."""
    with patch("camera.session.cv2.VideoCapture") as video_capture:
        cap = MagicMock()
        cap.isOpened.return_value = True
        cap.read.return_value = (True, np.zeros((480, 640, 3), dtype=np.uint8))
        video_capture.return_value = cap
        yield video_capture, cap


class TestCaptureSession:
    """Tests for CaptureSession lifecycle."""

    def test_open_uses_camera_index(self, mock_capture):
        """Open should create a capture on the configured index."""
        video_capture, _ = mock_capture
        session = CaptureSession(camera_index=2)

        session.open()

        video_capture.assert_called_once_with(2)
        assert session.is_open

    def test_open_twice_keeps_handle(self, mock_capture):
        """Opening an open session should not create a second handle."""
        video_capture, _ = mock_capture
        session = CaptureSession()

        session.open()
        session.open()

        assert video_capture.call_count == 1

    def test_unavailable_camera_raises(self, mock_capture):
        """A camera that fails to open should raise and release the handle."""
        _, cap = mock_capture
        cap.isOpened.return_value = False
        session = CaptureSession()

        with pytest.raises(CameraUnavailableError):
            session.open()

        cap.release.assert_called_once()
        assert not session.is_open

    def test_configure_sets_resolution(self, mock_capture):
        """Configure should request width and height."""
        _, cap = mock_capture
        session = CaptureSession()
        session.open()

        session.configure(640, 480)

        cap.set.assert_any_call(cv2.CAP_PROP_FRAME_WIDTH, 640)
        cap.set.assert_any_call(cv2.CAP_PROP_FRAME_HEIGHT, 480)

    def test_read_returns_frame(self, mock_capture):
        """Read should return the grabbed frame."""
        session = CaptureSession()
        session.open()

        frame = session.read()

        assert frame.shape == (480, 640, 3)

    def test_failed_read_raises(self, mock_capture):
        """A failed grab should raise instead of returning nothing."""
        _, cap = mock_capture
        cap.read.return_value = (False, None)
        session = CaptureSession()
        session.open()

        with pytest.raises(FrameCaptureError):
            session.read()

    def test_read_before_open_raises(self):
        """Using a session before open() is a programming error."""
        session = CaptureSession()

        with pytest.raises(RuntimeError):
            session.read()

    def test_close_is_idempotent(self, mock_capture):
        """Closing twice should release the device once."""
        _, cap = mock_capture
        session = CaptureSession()
        session.open()

        session.close()
        session.close()

        cap.release.assert_called_once()
        assert not session.is_open

    def test_context_manager(self, mock_capture):
        """The session should open on enter and release on exit."""
        _, cap = mock_capture

        with CaptureSession() as session:
            assert session.is_open

        cap.release.assert_called_once()
