"""
CamDumper Application Controller

Top-level controller that wires together all application components.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject

from camera.preview import PreviewWindow
from camera.session import CaptureSession
from camera.writer import FrameWriter
from config import CAPTURE_SETTINGS, PATHS, PREVIEW_SETTINGS, CaptureSettings
from engine.dumper import FrameDumper

logger = logging.getLogger(__name__)


class CamDumperApp(QObject):
    """
    Top-level application controller.
    Builds the capture session, writer, optional preview and dumper.
    """

    def __init__(self, settings: CaptureSettings = CAPTURE_SETTINGS):
        super().__init__()
        self.settings = settings

        self.session = CaptureSession(camera_index=settings.camera_index)
        self.writer = FrameWriter()

        # Preview window only when display is enabled
        self.preview: Optional[PreviewWindow] = None
        if settings.display:
            self.preview = PreviewWindow(
                window_name=PREVIEW_SETTINGS.window_name,
                wait_ms=PREVIEW_SETTINGS.wait_ms
            )

        self.dumper = FrameDumper(
            self.session,
            writer=self.writer,
            settings=settings,
            frames_dir=PATHS.frames_dir,
            preview=self.preview,
            parent=self
        )
        self.dumper.capture_finished.connect(self._on_capture_finished)

    def run(self) -> int:
        """
        Capture and dump one burst of frames.

        Returns:
            Number of frames captured
        """
        logger.info("Dumping up to %i frames to %s", self.settings.max_frames, PATHS.frames_dir)
        return self.dumper.run()

    def _on_capture_finished(self, count: int) -> None:
        """Handle end of the capture phase."""
        logger.info("Captured %i frames", count)
