"""A frame buffer shared between a producer thread and the render loop, and the video image."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

VIDEO_WIDTH = 640
VIDEO_HEIGHT = 480
PLACEHOLDER_PIXEL = bytes((0, 0, 0, 255))


class SharedFrame:
    """Holds the newest RGBA frame handed over by a producer, until it is taken."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._frame: bytes | None = None

    def put(self, frame: bytes) -> None:
        """Store *frame*, replacing any frame that has not been taken yet."""
        data = bytes(frame)
        with self._lock:
            self._frame = data

    def take(self) -> bytes | None:
        """Remove and return the stored frame, or ``None`` if there is none."""
        with self._lock:
            frame, self._frame = self._frame, None
        return frame


def _placeholder(width: int, height: int) -> bytearray:
    return bytearray(PLACEHOLDER_PIXEL * (width * height))


@dataclass
class VideoImage:
    """An RGBA8 image shown on screen, initially filled with opaque black."""

    width: int = VIDEO_WIDTH
    height: int = VIDEO_HEIGHT
    data: bytearray = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.data is None:
            self.data = _placeholder(self.width, self.height)
        else:
            self.data = bytearray(self.data)

    def upload_from(self, shared: SharedFrame) -> bool:
        """Copy the newest frame from *shared* into the image; report whether one was there."""
        frame = shared.take()
        if frame is None:
            return False
        self.data[:] = frame
        return True