"""fixkit - Windows workstation repair session engine."""

from .core.catalog import MenuEntry, OperationCatalog, order_key
from .core.config import FixConfig, load_config
from .core.context import RunContext
from .core.ledger import SessionLedger
from .core.outcome import Outcome, OutcomeKind
from .core.session_log import LogEntry, SessionLogger, Severity

__version__ = "1.0.0"
__all__ = [
    "MenuEntry",
    "OperationCatalog",
    "order_key",
    "FixConfig",
    "load_config",
    "RunContext",
    "SessionLedger",
    "Outcome",
    "OutcomeKind",
    "LogEntry",
    "SessionLogger",
    "Severity",
]
