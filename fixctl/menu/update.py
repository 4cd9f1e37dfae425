#!/usr/bin/env python3
"""
Windows Update Module

Resets the Windows Update components and exports the update log.
"""

from datetime import datetime
from pathlib import Path

from rich.markup import escape

from fixkit.core.config import FixConfig
from fixkit.core.errors import OperationFailure
from fixkit.core.operations import Operation, powershell, run_step

from .types import MenuCategory

UPDATE_SERVICES = ["wuauserv", "cryptSvc", "bits", "msiserver"]

# net stop returns 2 when the service is already stopped;
# net start returns 2 when it is already running.
NET_OK_CODES = (0, 2)


class UpdateResetOperation(Operation):
    label = "Reset Windows Update components"
    description = "Stop update services, rename the download caches, start services again"
    requires_confirmation = True
    confirm_prompt = "Reset Windows Update? Pending downloads will be discarded."

    def __init__(self, windows_dir: Path):
        self.windows_dir = windows_dir

    def execute(self, context) -> None:
        for service in UPDATE_SERVICES:
            run_step(context, ["net", "stop", service], ok_codes=NET_OK_CODES)

        suffix = datetime.now().strftime("%Y%m%d%H%M%S")
        for folder in (self.windows_dir / "SoftwareDistribution", self.windows_dir / "System32" / "catroot2"):
            if not folder.exists():
                continue
            target = folder.with_name(f"{folder.name}.bak-{suffix}")
            context.console.print(f"[blue]Renaming {escape(str(folder))} -> {escape(target.name)}[/blue]")
            try:
                folder.rename(target)
            except OSError as exc:
                raise OperationFailure(f"cannot rename {folder}: {exc}")

        for service in reversed(UPDATE_SERVICES):
            run_step(context, ["net", "start", service], ok_codes=NET_OK_CODES)


class UpdateLogOperation(Operation):
    label = "Generate Windows Update log"
    description = "Export the update ETW traces to a readable log file"

    def __init__(self, log_path: Path):
        self.log_path = log_path

    def execute(self, context) -> None:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        run_step(context, powershell(f"Get-WindowsUpdateLog -LogPath '{self.log_path}'"))
        context.console.print(f"[green]Update log written to {escape(str(self.log_path))}[/green]")


class UpdateModule:
    """Windows Update maintenance."""

    def __init__(self, config: FixConfig, windows_dir: Path):
        self.config = config
        self.windows_dir = windows_dir

    def get_category(self) -> MenuCategory:
        return MenuCategory(
            title="Windows Update",
            description="Repair and inspect Windows Update",
            operations=[
                UpdateResetOperation(self.windows_dir),
                UpdateLogOperation(self.config.update_log_path),
            ],
        )
