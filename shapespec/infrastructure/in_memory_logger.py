"""In-memory logger that keeps every entry it receives.

Useful in tests and for collecting all validation warnings produced by a
lenient conversion so they can be reported together.
"""

import threading
from dataclasses import dataclass, field
from typing import Any

from ..ports.logger import LoggerPort


@dataclass(frozen=True)
class LogEntry:
    """One recorded log call."""

    level: str
    message: str
    extra: dict[str, Any] = field(default_factory=dict)


class InMemoryLogger(LoggerPort):
    """Logger port implementation that records entries in a list."""

    def __init__(self):
        """Initialize with no entries."""
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()

    def _record(self, level: str, message: str, extra: dict[str, Any]) -> None:
        with self._lock:
            self._entries.append(LogEntry(level=level, message=message, extra=extra))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, kwargs)

    @property
    def entries(self) -> list[LogEntry]:
        """Snapshot of all recorded entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def entries_at(self, level: str) -> list[LogEntry]:
        """Recorded entries with the given level name."""
        return [entry for entry in self.entries if entry.level == level]

    def messages(self) -> list[str]:
        return [entry.message for entry in self.entries]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
