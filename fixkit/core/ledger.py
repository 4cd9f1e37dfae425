"""Run-scoped record of completed, failed and cancelled actions."""
from __future__ import annotations

from typing import List, Tuple

NO_ACTIONS_MESSAGE = "No actions performed this session."


class SessionLedger:
    """Append-only list of human-readable action descriptions.

    The ledger is independent of the log file and is only used to print the
    end-of-session summary.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []

    def record(self, description: str) -> None:
        self._entries.append(description)

    def flush(self) -> Tuple[str, ...]:
        return tuple(self._entries)

    def render_lines(self) -> List[str]:
        """Numbered summary lines, or the no-actions message for an empty run."""
        entries = self.flush()
        if not entries:
            return [NO_ACTIONS_MESSAGE]
        return [f"{i}. {entry}" for i, entry in enumerate(entries, 1)]

    def __len__(self) -> int:
        return len(self._entries)
