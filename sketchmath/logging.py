"""Logging utilities with timing and sketch frame tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional

from .config import LOG_ENABLED


class Logger:
    """Diagnostic logger prefixing lines with elapsed time and frame number.

    Silent unless enabled, so library helpers can report unusual input
    without cluttering a sketch's output.
    """

    def __init__(self, enabled: bool = LOG_ENABLED):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self.enabled: bool = enabled

    @property
    def frame(self) -> int:
        """Current sketch frame number."""
        return self._frame

    @frame.setter
    def frame(self, value: int) -> None:
        self._frame = int(value)

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def format(self, msg: str) -> str:
        return f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"

    def log(self, msg: str) -> None:
        """Write a message to stdout, falling back to stderr."""
        if not self.enabled:
            return
        line = self.format(msg)
        try:
            sys.stdout.write(line)
            sys.stdout.flush()
        except (OSError, ValueError):
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                pass

    def __call__(self, msg: str) -> None:
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def set_enabled(flag: bool) -> None:
    """Turn diagnostic output on or off."""
    get_logger().enabled = bool(flag)


def get_frame() -> int:
    return get_logger().frame


def set_frame(frame: int) -> None:
    get_logger().frame = frame


def increment_frame() -> None:
    """Advance the frame counter; call once per drawn frame."""
    get_logger().increment_frame()
