#!/usr/bin/env python3
"""
Apps and Maintenance Module

Cache rebuilds, built-in app repair and temporary file cleanup.
"""

import shutil
from pathlib import Path
from typing import List, Tuple

from rich.markup import escape
from rich.table import Table

from fixkit.core.config import FixConfig
from fixkit.core.errors import OperationFailure
from fixkit.core.operations import CommandOperation, Operation, powershell

from .system import format_bytes
from .types import MenuCategory

REREGISTER_APPS_SCRIPT = (
    "Get-AppxPackage -AllUsers | ForEach-Object { "
    "Add-AppxPackage -DisableDevelopmentMode -Register \"$($_.InstallLocation)\\AppXManifest.xml\" "
    "-ErrorAction SilentlyContinue }"
)


class TempCleanupOperation(Operation):
    label = "Clean temporary files"
    description = "Delete files in the user and system temp folders"
    requires_confirmation = True
    confirm_prompt = "Delete temporary files? Close other applications first."

    def __init__(self, temp_dirs: List[Path]):
        self.temp_dirs = temp_dirs

    def execute(self, context) -> None:
        existing = [d for d in self.temp_dirs if d.is_dir()]
        if not existing:
            raise OperationFailure("no temp directory found")

        table = Table()
        table.add_column("Folder", style="cyan")
        table.add_column("Removed", justify="right", style="green")
        table.add_column("In use", justify="right", style="yellow")
        table.add_column("Freed", justify="right", style="white")

        for folder in existing:
            removed, skipped, freed = clean_directory(folder)
            table.add_row(escape(str(folder)), str(removed), str(skipped), format_bytes(freed))
        context.console.print(table)


def clean_directory(folder: Path) -> Tuple[int, int, int]:
    """Remove the children of ``folder``; return (removed, skipped, bytes freed).

    Files held open by running programs are skipped.
    """
    removed = skipped = freed = 0
    for child in folder.iterdir():
        try:
            size = _size_of(child)
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
        except OSError:
            skipped += 1
            continue
        removed += 1
        freed += size
    return removed, skipped, freed


def _size_of(path: Path) -> int:
    if path.is_symlink() or not path.is_dir():
        return path.lstat().st_size
    total = 0
    for item in path.rglob("*"):
        try:
            if item.is_file() and not item.is_symlink():
                total += item.stat().st_size
        except OSError:
            continue
    return total


class MaintenanceModule:
    """Cache and app maintenance."""

    def __init__(self, config: FixConfig):
        self.config = config

    def get_category(self) -> MenuCategory:
        return MenuCategory(
            title="Apps & Maintenance",
            description="Rebuild caches, repair built-in apps, free disk space",
            operations=[
                CommandOperation(
                    "Rebuild icon cache",
                    "Refresh the shell icon and thumbnail cache",
                    [["ie4uinit.exe", "-show"]],
                    requires_confirmation=True,
                    confirm_prompt="Rebuild the icon cache? Desktop icons may flicker.",
                ),
                CommandOperation(
                    "Re-register built-in apps",
                    "Re-register every installed AppX package for all users",
                    [powershell(REREGISTER_APPS_SCRIPT)],
                    requires_confirmation=True,
                    confirm_prompt="Re-register all built-in apps? This takes several minutes.",
                ),
                CommandOperation(
                    "Repair Microsoft Store",
                    "Clear the Store cache (wsreset)",
                    [["wsreset.exe"]],
                    requires_confirmation=True,
                    confirm_prompt="Reset the Microsoft Store cache?",
                ),
                TempCleanupOperation(self.config.temp_dirs),
            ],
        )
