"""Tri-state result of invoking a maintenance operation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Outcome:
    """Result reported by the operation wrapper."""

    kind: OutcomeKind
    detail: str = ""

    @classmethod
    def success(cls, detail: str = "") -> "Outcome":
        return cls(OutcomeKind.SUCCESS, detail)

    @classmethod
    def failure(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.FAILURE, detail)

    @classmethod
    def cancelled(cls, detail: str = "") -> "Outcome":
        return cls(OutcomeKind.CANCELLED, detail)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    def describe(self, label: str) -> str:
        """Return the ledger line for this outcome, e.g. ``FAILURE: Check disk (exit 3)``."""
        text = f"{self.kind.value}: {label}"
        if self.detail and self.kind is not OutcomeKind.SUCCESS:
            text += f" ({self.detail})"
        return text
