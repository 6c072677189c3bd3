"""
Log collection and viewing collaborators of the feedback form.

No PyQt6 import at module level (keeps this importable without a display).
"""

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from pathlib import Path

from pinpoint.logging import DEFAULT_LOG_FILE, get_logger

logger = get_logger(__name__)

DEFAULT_LINE_COUNT = 200


class PathSanitizer:
    """Replaces user home-directory paths with <USER_HOME> in any string."""

    PLACEHOLDER = "<USER_HOME>"

    @classmethod
    def sanitize(cls, text: str) -> str:
        return text.replace(str(Path.home()), cls.PLACEHOLDER)


class LogCollector(ABC):
    """Source of log lines attached to feedback."""

    @abstractmethod
    def retrieve_logs(self) -> tuple[str, ...]:
        """Return the collected log lines, oldest first."""


class LogViewer(ABC):
    """Something able to show a collector's logs to the user."""

    @abstractmethod
    def view_logs(self, collector: LogCollector, parent=None) -> None:
        ...


@dataclass(frozen=True)
class LogSupport:
    """Which parts of the logging subsystem are available to the form."""

    log_collector: LogCollector | None = None
    log_viewer: LogViewer | None = None

    @property
    def has_log_collector(self) -> bool:
        return self.log_collector is not None

    @property
    def has_log_viewer(self) -> bool:
        return self.log_viewer is not None


class FileLogCollector(LogCollector):
    """Collects the tail of a log file, with home-directory paths sanitized.

    A missing or unreadable file yields no lines rather than an error;
    feedback can still be sent without logs.
    """

    def __init__(self, log_path: str | None = None, max_lines: int = DEFAULT_LINE_COUNT) -> None:
        if max_lines <= 0:
            raise ValueError(f"max_lines must be positive, got {max_lines}")
        self._log_path = log_path if log_path is not None else DEFAULT_LOG_FILE
        self._max_lines = max_lines

    @property
    def log_path(self) -> str:
        return self._log_path

    def retrieve_logs(self) -> tuple[str, ...]:
        try:
            with open(self._log_path, "r", errors="replace") as f:
                tail: deque[str] = deque(f, maxlen=self._max_lines)
        except OSError as e:
            logger.debug(f"No logs collected from {self._log_path}: {e}")
            return ()

        return tuple(PathSanitizer.sanitize(line.rstrip("\n")) for line in tail)
