"""User-facing progress logger for the scaffolding run."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Deque, Literal

from rich.console import Console
from rich.text import Text

LogLevel = Literal["debug", "info", "step", "success", "warning", "error"]

_MARKERS: dict[str, tuple[str, str]] = {
    "debug": ("🔍", "dim"),
    "info": ("ℹ", "blue"),
    "step": ("▶", "cyan"),
    "success": ("✓", "green"),
    "warning": ("⚠", "yellow"),
    "error": ("✖", "red"),
}

_stdlib_logger = logging.getLogger("create_interwoven_app")


@dataclass(slots=True)
class LogEntry:
    """Represents a single reported message."""

    timestamp: datetime
    level: LogLevel
    message: str


class ScaffoldLogger:
    """Prints styled progress lines and keeps a short history of them.

    Debug output only reaches the console when ``verbose`` is set; every
    message is also forwarded at DEBUG level to the ``create_interwoven_app``
    stdlib logger.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        verbose: bool = False,
        max_entries: int = 200,
    ) -> None:
        self.console = console or Console()
        self.verbose = verbose
        self.max_entries = max(max_entries, 1)
        self._entries: Deque[LogEntry] = deque(maxlen=self.max_entries)

    def debug(self, message: str) -> None:
        self._emit("debug", message)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def step(self, message: str) -> None:
        self._emit("step", message)

    def success(self, message: str) -> None:
        self._emit("success", message)

    def warn(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def recent(self, *, level: str | None = None, limit: int = 50) -> list[LogEntry]:
        entries = list(self._entries)
        if level is not None:
            entries = [entry for entry in entries if entry.level == level]
        if limit <= 0:
            return []
        return entries[-limit:]

    def messages(self, level: str | None = None) -> list[str]:
        return [entry.message for entry in self.recent(level=level, limit=self.max_entries)]

    def _emit(self, level: LogLevel, message: str) -> None:
        self._entries.append(LogEntry(timestamp=datetime.now(UTC), level=level, message=message))
        _stdlib_logger.debug("[%s] %s", level, message)
        if level == "debug" and not self.verbose:
            return
        marker, style = _MARKERS[level]
        line = Text()
        line.append(marker, style=style)
        line.append(" ")
        line.append(message)
        self.console.print(line)


__all__ = ["LogEntry", "LogLevel", "ScaffoldLogger"]
