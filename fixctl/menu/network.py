#!/usr/bin/env python3
"""
Network Module

Resets the Winsock catalog and TCP/IP stack and flushes the DNS cache.
"""

from fixkit.core.config import FixConfig
from fixkit.core.operations import CommandOperation

from .types import MenuCategory


class NetworkModule:
    """Network stack repair."""

    def __init__(self, config: FixConfig):
        self.config = config

    def get_category(self) -> MenuCategory:
        return MenuCategory(
            title="Network",
            description="Repair name resolution and the TCP/IP stack",
            operations=[
                CommandOperation(
                    "Reset network stack",
                    "Winsock reset, TCP/IP reset and DNS cache flush",
                    [
                        ["netsh", "winsock", "reset"],
                        ["netsh", "int", "ip", "reset"],
                        ["ipconfig", "/flushdns"],
                    ],
                    requires_confirmation=True,
                    confirm_prompt="Reset the network stack? A restart is required afterwards.",
                ),
            ],
        )
