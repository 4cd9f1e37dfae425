"""Append-only session log shared by the console and a persistent log file.

Every entry is echoed to the rich console with a severity style and, once a
file has been attached with :meth:`SessionLogger.open`, appended to that file
through a standard ``logging.FileHandler``. Files are only ever opened in
append mode; nothing here truncates, rotates or rewrites an existing log.
"""
from __future__ import annotations

import logging
import re
import tempfile
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from itertools import count
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Characters Windows refuses in file names. ':' is handled separately so a
# drive prefix such as ``C:`` stays legal.
_ILLEGAL_PATH_CHARS = re.compile(r'[<>"|?*\x00-\x1f]')

_logger_ids = count(1)


class Severity(str, Enum):
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}

_STYLES = {
    Severity.INFO: "white",
    Severity.WARN: "yellow",
    Severity.ERROR: "bold red",
}


@dataclass(frozen=True)
class LogEntry:
    """A single timestamped log line."""

    timestamp: datetime
    severity: Severity
    message: str

    def format(self) -> str:
        return f"{self.timestamp.strftime(TIMESTAMP_FORMAT)} [{self.severity.value}] {self.message}"


def default_log_path(log_dir: str | Path | None = None, now: Optional[datetime] = None) -> Path:
    """Return a run-specific log path in ``log_dir`` (the temp dir by default)."""
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    base = Path(log_dir) if log_dir else Path(tempfile.gettempdir())
    return base / f"fixkit_{stamp}.log"


def validate_log_path(text: str) -> Path:
    """Validate an operator-supplied log path.

    Raises ValueError when the path is empty or contains characters that are
    not allowed in Windows file names.
    """
    candidate = text.strip().strip('"')
    if not candidate:
        raise ValueError("Log path is empty")
    match = _ILLEGAL_PATH_CHARS.search(candidate)
    if match:
        raise ValueError(f"Log path contains an illegal character: {match.group(0)!r}")
    colon = candidate.find(":")
    if colon != -1 and not (colon == 1 and candidate[0].isalpha() and ":" not in candidate[2:]):
        raise ValueError("Log path contains ':' outside the drive prefix")
    return Path(candidate).expanduser()


class SessionLogger:
    """Process-wide, append-only log sink for one repair session."""

    def __init__(
        self,
        console: Console,
        fallback_dir: str | Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.console = console
        self.fallback_dir = fallback_dir
        self.clock = clock
        self.path: Optional[Path] = None
        self.entries: List[LogEntry] = []
        self._handler: Optional[logging.Handler] = None
        self._logger = logging.getLogger(f"fixkit.session.{next(_logger_ids)}")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

    # ------------------------------------------------------------------
    # File lifecycle
    # ------------------------------------------------------------------
    def open(self, path: str | Path | None = None) -> Optional[Path]:
        """Attach the log file, falling back to the temp directory on failure.

        Returns the path actually in use, or None when no file could be
        opened and the log is console-only.
        """
        if self._handler is not None:
            return self.path

        requested = Path(path) if path else default_log_path(self.fallback_dir)
        try:
            self._attach(requested)
        except OSError as exc:
            fallback = default_log_path(None, now=self.clock())
            self.console.print(
                f"[yellow]Cannot write log file {escape(str(requested))} ({escape(str(exc))}); "
                f"using {escape(str(fallback))}[/yellow]"
            )
            try:
                self._attach(fallback)
            except OSError as exc2:
                self.console.print(f"[red]Log file disabled: {escape(str(exc2))}[/red]")
                return None
        return self.path

    def _attach(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(message)s"))
        self._logger.addHandler(handler)
        self._handler = handler
        self.path = path

    def close(self) -> None:
        if self._handler is None:
            return
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------
    def log(self, message: str, severity: Severity = Severity.INFO) -> LogEntry:
        severity = Severity(severity)
        entry = LogEntry(timestamp=self.clock(), severity=severity, message=message)
        self.entries.append(entry)
        if self._handler is not None:
            self._logger.log(_LEVELS[severity], entry.format())
        style = _STYLES[severity]
        self.console.print(f"[{style}][{severity.value}] {escape(message)}[/{style}]")
        return entry

    def info(self, message: str) -> LogEntry:
        return self.log(message, Severity.INFO)

    def warn(self, message: str) -> LogEntry:
        return self.log(message, Severity.WARN)

    def error(self, message: str) -> LogEntry:
        return self.log(message, Severity.ERROR)

    def tail(self, lines: int = 20) -> List[str]:
        """Return the last ``lines`` lines of the log file (or of memory when console-only)."""
        if self.path is not None and self._handler is not None:
            self._handler.flush()
            try:
                with self.path.open("r", encoding="utf-8", errors="replace") as fh:
                    content = fh.read().splitlines()
                return content[-lines:]
            except OSError:
                pass
        return [entry.format() for entry in self.entries[-lines:]]
