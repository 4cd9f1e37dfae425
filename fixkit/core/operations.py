"""Maintenance operation interface and the command-backed base variant."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from rich.markup import escape

from fixkit.utils import cmd_runner

if TYPE_CHECKING:
    from fixkit.core.context import RunContext
    from fixkit.core.outcome import Outcome


class Operation:
    """One maintenance task offered by the catalog.

    Subclasses implement :meth:`execute`. Returning None (or a success
    Outcome) reports success; raising OperationFailure, or returning
    ``Outcome.failure``, reports a failure. Bodies never write to the session
    log or the ledger; the wrapper does that bookkeeping.
    """

    label: str = ""
    description: str = ""
    requires_confirmation: bool = False
    confirm_prompt: Optional[str] = None

    def execute(self, context: "RunContext") -> Optional["Outcome"]:
        raise NotImplementedError

    def confirmation_text(self) -> str:
        return self.confirm_prompt or f"{self.label}: this changes system state. Continue?"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"


class CommandOperation(Operation):
    """Run a fixed sequence of external commands, stopping at the first failure."""

    def __init__(
        self,
        label: str,
        description: str,
        commands: Sequence[Sequence[str]],
        requires_confirmation: bool = False,
        confirm_prompt: Optional[str] = None,
        ok_codes: Sequence[int] = (0,),
    ):
        self.label = label
        self.description = description
        self.commands: List[List[str]] = [list(cmd) for cmd in commands]
        self.requires_confirmation = requires_confirmation
        self.confirm_prompt = confirm_prompt
        self.ok_codes = tuple(ok_codes)

    def execute(self, context: "RunContext") -> None:
        for cmd in self.commands:
            run_step(context, cmd, ok_codes=self.ok_codes)


def run_step(context: "RunContext", cmd: Sequence[str], ok_codes: Sequence[int] = (0,), show_output: bool = True):
    """Announce, run and echo one command. Raises OperationFailure on error."""
    context.console.print(f"[blue]Running: {escape(' '.join(cmd))}[/blue]")
    result = cmd_runner.run_checked(cmd, ok_codes=ok_codes)
    if show_output:
        output = (result.stdout or "").strip()
        if output:
            context.console.print(escape(output), highlight=False)
    return result


def powershell(script: str) -> List[str]:
    """Build a non-interactive PowerShell command line for ``script``."""
    return ["powershell.exe", "-NoProfile", "-NonInteractive", "-ExecutionPolicy", "Bypass", "-Command", script]
