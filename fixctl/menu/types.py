#!/usr/bin/env python3
"""
Menu Types and Data Classes

Defines the data structures shared by the repair console menu modules.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from fixkit.core.operations import Operation


class LoopState(str, Enum):
    """States of the repair console main loop."""
    RENDERING = "rendering"
    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    SUMMARIZING = "summarizing"
    TERMINATED = "terminated"


@dataclass
class MenuCategory:
    """A group of operations contributed by one menu module."""
    title: str
    description: str
    operations: list[Operation]
    # Fixed letter selectors; None means number sequentially.
    selectors: Optional[list[str]] = None
