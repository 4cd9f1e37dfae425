"""Exception types raised by the session engine."""
from __future__ import annotations


class FixkitError(Exception):
    """Base class for all fixkit errors."""


class PrivilegeError(FixkitError):
    """The process is not running with administrative rights."""


class SelectionError(FixkitError):
    """A selector does not match any catalog entry."""

    def __init__(self, selector: str):
        super().__init__(f"Invalid choice: {selector}")
        self.selector = selector


class ConfirmationDeclined(FixkitError):
    """The operator did not give the affirmative answer at a confirmation prompt."""


class OperationFailure(FixkitError):
    """An external maintenance capability reported or raised an error."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class CatalogError(FixkitError):
    """Invalid catalog registration (bad selector, collision, closed catalog)."""
