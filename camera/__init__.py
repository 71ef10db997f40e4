"""
CamDumper Camera Integration

Camera session, frame buffer, image writer and preview window.
"""

from camera.frame_buffer import FrameBuffer, FrameSlot, BufferFullError
from camera.session import CaptureSession, CameraUnavailableError, FrameCaptureError
from camera.writer import FrameWriter, FrameWriteError
from camera.preview import PreviewWindow

__all__ = [
    # Buffer
    "FrameBuffer",
    "FrameSlot",
    "BufferFullError",
    # Capture
    "CaptureSession",
    "CameraUnavailableError",
    "FrameCaptureError",
    # Output
    "FrameWriter",
    "FrameWriteError",
    "PreviewWindow",
]
