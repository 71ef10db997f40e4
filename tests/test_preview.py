"""
Tests for the PreviewWindow.
"""

import numpy as np
from unittest.mock import patch

from camera.preview import PreviewWindow


class TestPreviewWindow:
    """Tests for preview display and key polling."""

    def setup_method(self):
        self.frame = np.zeros((48, 64, 3), dtype=np.uint8)

    def test_show_without_key(self):
        """No key press should let capture continue."""
        preview = PreviewWindow(window_name="frame", wait_ms=5)

        with patch("camera.preview.cv2") as cv2:
            cv2.waitKey.return_value = -1
            pressed = preview.show(self.frame)

        assert not pressed
        cv2.namedWindow.assert_called_once()
        cv2.imshow.assert_called_once_with("frame", self.frame)
        cv2.waitKey.assert_called_once_with(5)

    def test_show_with_key(self):
        """A key press should be reported."""
        preview = PreviewWindow()

        with patch("camera.preview.cv2") as cv2:
            cv2.waitKey.return_value = ord("q")
            assert preview.show(self.frame)

    def test_open_once(self):
        """The window should be created once across frames."""
        preview = PreviewWindow()

        with patch("camera.preview.cv2") as cv2:
            cv2.waitKey.return_value = -1
            preview.show(self.frame)
            preview.show(self.frame)

        assert cv2.namedWindow.call_count == 1

    def test_close(self):
        """Close should destroy an open window only."""
        preview = PreviewWindow(window_name="frame")

        with patch("camera.preview.cv2") as cv2:
            preview.close()
            cv2.destroyWindow.assert_not_called()

            preview.open()
            preview.close()

        cv2.destroyWindow.assert_called_once_with("frame")
        assert not preview.is_open
