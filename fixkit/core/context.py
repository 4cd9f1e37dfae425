"""Process-wide state for one repair session."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import Prompt

from fixkit.core.catalog import OperationCatalog
from fixkit.core.config import FixConfig
from fixkit.core.gate import ConfirmationGate
from fixkit.core.ledger import SessionLedger
from fixkit.core.session_log import SessionLogger


@dataclass
class RunContext:
    """Everything the menu loop, wrapper and operations share.

    Built once at startup. ``log_file_path`` is only set while the session
    starts; everything else is read-only afterwards.
    """

    console: Console
    config: FixConfig
    logger: SessionLogger
    ledger: SessionLedger = field(default_factory=SessionLedger)
    catalog: OperationCatalog = field(default_factory=OperationCatalog)
    input_stream: Optional[TextIO] = None
    log_file_path: Optional[Path] = None
    admin_privilege_confirmed: bool = False
    gate: ConfirmationGate = field(init=False)

    def __post_init__(self) -> None:
        self.gate = ConfirmationGate(self.ask, self.logger, token=self.config.confirm_token)

    @classmethod
    def create(
        cls,
        config: FixConfig,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
    ) -> "RunContext":
        console = console or Console()
        logger = SessionLogger(console, fallback_dir=config.log_dir)
        return cls(console=console, config=config, logger=logger, input_stream=input_stream)

    def ask(self, prompt: str, default: str = "") -> str:
        """Read one line from the operator."""
        return Prompt.ask(
            prompt,
            console=self.console,
            default=default,
            show_default=False,
            stream=self.input_stream,
        )

    def pause(self, message: str = "Press Enter to continue") -> None:
        try:
            self.ask(f"\n[dim]{message}[/dim]")
        except (EOFError, KeyboardInterrupt):
            self.console.print()
