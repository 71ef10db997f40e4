"""
CamDumper Configuration

Centralized settings, paths, and logging setup for the application.
"""

import logging
import tempfile
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import appdirs


# Application info
APP_NAME = "CamDumper"
APP_AUTHOR = "RoboticsLab"
APP_VERSION = "1.0.0"


LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Dumped frames land here (/tmp on Linux)
    frames_dir: Path = Path(tempfile.gettempdir())

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def log_file(self) -> Path:
        return self.log_dir / "camdumper.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.frames_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class CaptureSettings:
    """Camera and capture loop settings."""
    # Default camera index
    camera_index: int = 0

    # Requested resolution
    width: int = 640
    height: int = 480

    # Buffer capacity; capture stops once this many frames are taken
    max_frames: int = 100

    # Report the moving-average FPS every N frames
    report_every: int = 10

    # Keep frames in memory and write them after capture
    use_buffer: bool = True

    # Show a live preview window
    display: bool = False

    # Encoded image format (file extension)
    image_format: str = "png"


@dataclass(frozen=True)
class OverlaySettings:
    """Filename overlay drawn on every written frame."""
    origin: tuple[int, int] = (10, 20)
    font_scale: float = 1.0
    color: tuple[int, int, int] = (0, 255, 0)  # BGR
    thickness: int = 1


@dataclass(frozen=True)
class PreviewSettings:
    """Live preview window settings."""
    window_name: str = "frame"

    # Keyboard poll per displayed frame in milliseconds
    wait_ms: int = 5


# Singleton instances
PATHS = Paths()
CAPTURE_SETTINGS = CaptureSettings()
OVERLAY_SETTINGS = OverlaySettings()
PREVIEW_SETTINGS = PreviewSettings()


def configure_logging(
    level_name: str = "info",
    log_file: Optional[Path] = None,
    *,
    fmt: str = LOG_FORMAT,
    datefmt: str = "%H:%M:%S",
) -> None:
    """
    Configure root logging with console output and optional file output.

    Args:
        level_name: Logging level (debug, info, warning, error, critical)
        log_file: Optional path to also write logs to
        fmt: Log message format
        datefmt: Date/time format
    """
    level = LOG_LEVELS.get(level_name.lower())
    if level is None:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Invalid log level '{level_name}'. Choose from: {valid}")

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(level)
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def init_config() -> None:
    """Initialize configuration, create required directories and set up logging."""
    PATHS.ensure_directories()
    configure_logging("info", PATHS.log_file)
