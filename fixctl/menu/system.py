#!/usr/bin/env python3
"""
System Information Module

Read-only inspection operations: system summary, disk usage and the state of
critical Windows services.
"""

import os
import shutil
import string
from pathlib import Path
from typing import List

from rich.table import Table

from fixkit.core.config import FixConfig
from fixkit.core.errors import OperationFailure
from fixkit.core.operations import CommandOperation, Operation
from fixkit.utils import cmd_runner

from .types import MenuCategory


class DiskUsageOperation(Operation):
    label = "Show disk usage"
    description = "Size, used and free space for each local drive"

    def execute(self, context) -> None:
        drives = self._drives()
        if not drives:
            raise OperationFailure("no local drives found")

        table = Table()
        table.add_column("Drive", style="cyan")
        table.add_column("Size", justify="right", style="white")
        table.add_column("Used", justify="right", style="yellow")
        table.add_column("Free", justify="right", style="green")
        table.add_column("Usage", justify="right", style="white")

        for drive in drives:
            try:
                usage = shutil.disk_usage(drive)
            except OSError:
                # Empty card readers and disconnected network drives.
                table.add_row(str(drive), "─", "─", "─", "[dim]unavailable[/dim]")
                continue
            percent = (usage.used / usage.total * 100) if usage.total else 0
            color = "green" if percent < 80 else "yellow" if percent < 90 else "red"
            table.add_row(
                str(drive),
                format_bytes(usage.total),
                format_bytes(usage.used),
                format_bytes(usage.free),
                f"[{color}]{percent:.1f}%[/{color}]",
            )
        context.console.print(table)

    def _drives(self) -> List[Path]:
        if os.name != "nt":
            return [Path("/")]
        return [Path(f"{letter}:\\") for letter in string.ascii_uppercase if Path(f"{letter}:\\").exists()]


class CriticalServicesOperation(Operation):
    label = "Check critical services"
    description = "Query the services Windows needs to stay healthy"

    def __init__(self, services: List[str]):
        self.services = services

    def execute(self, context) -> None:
        table = Table()
        table.add_column("Service", style="white")
        table.add_column("State", justify="center")

        problems = []
        for name in self.services:
            state = self._query(name)
            if state == "RUNNING":
                table.add_row(name, "[green]🟢 RUNNING[/green]")
            else:
                table.add_row(name, f"[red]🔴 {state}[/red]")
                problems.append(f"{name}={state}")

        context.console.print(table)
        if problems:
            raise OperationFailure("not running: " + ", ".join(problems))

    def _query(self, name: str) -> str:
        try:
            result = cmd_runner.run_checked(["sc", "query", name])
        except OperationFailure:
            return "MISSING"
        return parse_service_state(result.stdout)


def parse_service_state(output: str) -> str:
    """Extract the state word from ``sc query`` output (``STATE : 4  RUNNING``)."""
    for line in (output or "").splitlines():
        if line.strip().upper().startswith("STATE"):
            parts = line.split(":", 1)[-1].split()
            if len(parts) >= 2:
                return parts[1].upper()
    return "UNKNOWN"


def format_bytes(value: float) -> str:
    """Format bytes value with appropriate units."""
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if value < 1024.0:
            return f"{value:.1f} {unit}"
        value /= 1024.0
    return f"{value:.1f} PB"


class SystemModule:
    """System information and health checks."""

    def __init__(self, config: FixConfig):
        self.config = config

    def get_category(self) -> MenuCategory:
        return MenuCategory(
            title="System Information",
            description="Inspect the workstation without changing it",
            operations=[
                CommandOperation("Show system information", "OS build, hardware and hotfix summary", [["systeminfo"]]),
                DiskUsageOperation(),
                CriticalServicesOperation(self.config.critical_services),
            ],
        )
