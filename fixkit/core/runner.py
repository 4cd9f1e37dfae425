"""Uniform execution contract for every maintenance operation.

``invoke`` is the only place that turns an operation run into session log
and ledger entries. Each call produces exactly one log entry and exactly one
ledger entry, whatever the outcome, and always hands control back to the
caller after a "Press Enter to continue" prompt.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.rule import Rule

from fixkit.core.errors import ConfirmationDeclined, OperationFailure
from fixkit.core.outcome import Outcome, OutcomeKind

if TYPE_CHECKING:
    from fixkit.core.context import RunContext
    from fixkit.core.operations import Operation

_INDICATORS = {
    OutcomeKind.SUCCESS: "[bold green]✓ SUCCESS[/bold green]",
    OutcomeKind.FAILURE: "[bold red]✗ FAILURE[/bold red]",
    OutcomeKind.CANCELLED: "[bold yellow]– CANCELLED[/bold yellow]",
}


def invoke(operation: "Operation", context: "RunContext") -> Outcome:
    """Run ``operation`` with confirmation, bookkeeping and a continue prompt."""
    label = operation.label
    try:
        if operation.requires_confirmation:
            context.gate.require(operation.confirmation_text(), subject=label)
        context.console.print(Rule(f"[bold]{escape(label)}[/bold]", style="blue"))
        outcome = _execute(operation, context)
    except ConfirmationDeclined:
        # The gate has already written the WARN entry.
        outcome = Outcome.cancelled()
        context.ledger.record(outcome.describe(label))
    else:
        _record(outcome, label, context)

    context.console.print(f"{_INDICATORS[outcome.kind]} {escape(label)}")
    context.pause()
    return outcome


def _execute(operation: "Operation", context: "RunContext") -> Outcome:
    try:
        result = operation.execute(context)
    except ConfirmationDeclined:
        raise
    except OperationFailure as exc:
        return Outcome.failure(exc.detail)
    except KeyboardInterrupt:
        return Outcome.failure("interrupted by user")
    except Exception as exc:
        return Outcome.failure(f"{type(exc).__name__}: {exc}")
    return result if result is not None else Outcome.success()


def _record(outcome: Outcome, label: str, context: "RunContext") -> None:
    if outcome.kind is OutcomeKind.SUCCESS:
        context.logger.info(f"Completed: {label}")
    elif outcome.kind is OutcomeKind.FAILURE:
        context.logger.error(f"Failed: {label}: {outcome.detail}")
    else:
        context.logger.warn(f"Cancelled: {label}")
    context.ledger.record(outcome.describe(label))
