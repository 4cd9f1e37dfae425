"""Yes/no checkpoint in front of state-changing operations."""
from __future__ import annotations

from typing import Callable

from rich.markup import escape

from fixkit.core.errors import ConfirmationDeclined
from fixkit.core.session_log import SessionLogger

CANCELLED_MESSAGE = "Action cancelled by user"


class ConfirmationGate:
    """Ask one question and accept only the affirmative token.

    The token (``Y`` by default) is compared case-insensitively after
    surrounding whitespace is stripped, so ``y`` confirms while ``yes``,
    ``n`` and an empty line all decline. Every decline is logged once at
    WARN severity.
    """

    def __init__(self, ask: Callable[[str], str], logger: SessionLogger, token: str = "Y"):
        self.ask = ask
        self.logger = logger
        self.token = token

    def confirm(self, prompt: str, subject: str = "") -> bool:
        """Ctrl+C or end of input at the prompt counts as a decline."""
        try:
            answer = self.ask(f"{prompt} {escape(f'[{self.token}/N]')}")
        except (EOFError, KeyboardInterrupt):
            answer = ""
        if (answer or "").strip().casefold() == self.token.casefold():
            return True
        message = f"{CANCELLED_MESSAGE}: {subject}" if subject else CANCELLED_MESSAGE
        self.logger.warn(message)
        return False

    def require(self, prompt: str, subject: str = "") -> None:
        """Like :meth:`confirm` but raise ConfirmationDeclined on decline."""
        if not self.confirm(prompt, subject):
            raise ConfirmationDeclined(subject or prompt)
