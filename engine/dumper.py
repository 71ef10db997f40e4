"""
Frame Dumper - Capture a bounded burst of frames and write them to disk.

Runs the capture loop against an owned CaptureSession, keeps frames in a
FrameBuffer, and writes them out as timestamped images once capture ends.
Everything happens sequentially on the calling thread; signals are
emitted synchronously for progress reporting.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, Signal

from camera.frame_buffer import FrameBuffer
from camera.preview import PreviewWindow
from camera.session import CaptureSession
from camera.writer import FrameWriter
from config import CAPTURE_SETTINGS, PATHS, CaptureSettings
from engine.timer import ElapsedTimer
from engine.timestamp import timestamp

logger = logging.getLogger(__name__)

# Write-out progress is logged every N files
WRITE_PROGRESS_EVERY = 10


class FrameDumper(QObject):
    """
    Captures up to `max_frames` frames and dumps them as image files.

    In buffered mode (the default) frames are held in memory during
    capture and written afterwards with their filename burned in. With
    `use_buffer=False` each frame is written as soon as it is captured,
    without overlay.

    Usage:
        dumper = FrameDumper(CaptureSession(0))
        dumper.fps_reported.connect(on_fps)
        written = dumper.run()
    """

    # Signals
    frame_captured = Signal(int, str)   # capture index, output filename
    fps_reported = Signal(float)        # moving-average frames per second
    frame_written = Signal(int, str)    # capture index, written path
    capture_finished = Signal(int)      # number of frames captured

    def __init__(
        self,
        session: CaptureSession,
        writer: Optional[FrameWriter] = None,
        settings: CaptureSettings = CAPTURE_SETTINGS,
        frames_dir: Path = PATHS.frames_dir,
        preview: Optional[PreviewWindow] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialize the dumper.

        Args:
            session: Camera session to capture from (opened by run())
            writer: Image writer (default: FrameWriter())
            settings: Capture settings
            frames_dir: Directory the images are written to
            preview: Optional preview window; a key press stops capture
        """
        super().__init__(parent)
        self.session = session
        self.writer = writer or FrameWriter()
        self.settings = settings
        self.frames_dir = Path(frames_dir)
        self.preview = preview

        self.buffer = FrameBuffer(capacity=settings.max_frames)
        self.timer = ElapsedTimer()
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        """Number of frames captured by the last capture()."""
        return self._frame_count

    def next_filename(self) -> Path:
        """Build the output path for a frame captured now."""
        return self.frames_dir / f"{timestamp()}.{self.settings.image_format}"

    def run(self) -> int:
        """
        Open the camera, capture, release the camera, then write out.

        Returns:
            Number of frames captured

        Raises:
            CameraUnavailableError: If the camera cannot be opened
        """
        self.session.open()
        try:
            self.session.configure(self.settings.width, self.settings.height)
            count = self.capture()
        finally:
            try:
                self.session.close()
            finally:
                if self.preview is not None:
                    self.preview.close()

        if self.settings.use_buffer:
            self.flush()
        return count

    def capture(self) -> int:
        """
        Run the capture loop on an already opened session.

        Stops once `max_frames` frames have been captured or a key is
        pressed in the preview window.

        Returns:
            Number of frames captured
        """
        use_buffer = self.settings.use_buffer
        report_every = self.settings.report_every
        if not use_buffer:
            logger.info("Not using buffers, encoding on the fly")

        self.buffer.clear()
        self._frame_count = 0
        self.timer.reset()

        while self._frame_count < self.settings.max_frames:
            frame = self.session.read()
            filename = self.next_filename()
            index = self._frame_count

            if use_buffer:
                if not self.buffer.is_allocated:
                    logger.info("Creating buffer for %i frames", self.buffer.capacity)
                self.buffer.push(frame, filename)
            else:
                path = self.writer.write(frame, filename)
                self.frame_written.emit(index, str(path))

            self._frame_count += 1
            self.frame_captured.emit(index, str(filename))

            if report_every and self._frame_count % report_every == 0:
                self._report_fps(report_every)

            if self.preview is not None and self.preview.show(frame):
                logger.info("Key pressed, stopping capture after %i frames", self._frame_count)
                break

        self.capture_finished.emit(self._frame_count)
        return self._frame_count

    def flush(self) -> int:
        """
        Write every buffered frame to disk with its filename burned in.

        Returns:
            Number of files written
        """
        total = self.buffer.size
        for slot in self.buffer:
            if slot.index % WRITE_PROGRESS_EVERY == 0:
                logger.info("Written %i of %i files", slot.index, total)
            path = self.writer.write(slot.frame, slot.filename, overlay_text=str(slot.filename))
            self.frame_written.emit(slot.index, str(path))
        return total

    def _report_fps(self, frames: int) -> None:
        """Report the average rate over the last `frames` frames and restart the timer."""
        elapsed = self.timer.elapsed_seconds()
        fps = frames / elapsed if elapsed else float("inf")
        logger.info("Moving average fps:%g", fps)
        self.fps_reported.emit(fps)
        self.timer.reset()
