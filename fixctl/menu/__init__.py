#!/usr/bin/env python3
"""
Modular Menu System for the repair console

Each module contributes one MenuCategory of maintenance operations; the core
registers them in the session catalog and runs the main loop.
"""

from fixctl.menu.core import RepairConsole, build_catalog, build_categories
from fixctl.menu.types import LoopState, MenuCategory
from fixctl.menu.system import SystemModule
from fixctl.menu.repair import RepairModule
from fixctl.menu.update import UpdateModule
from fixctl.menu.network import NetworkModule
from fixctl.menu.maintenance import MaintenanceModule
from fixctl.menu.about import HelpModule

__all__ = [
    'RepairConsole',
    'build_catalog',
    'build_categories',
    'LoopState',
    'MenuCategory',
    'SystemModule',
    'RepairModule',
    'UpdateModule',
    'NetworkModule',
    'MaintenanceModule',
    'HelpModule',
]
