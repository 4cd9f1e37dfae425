#!/usr/bin/env python3
"""
Diagnostics and Repair Module

System File Checker, DISM component-store checks, chkdsk and restore points.
"""

from datetime import datetime

from fixkit.core.config import FixConfig
from fixkit.core.operations import CommandOperation, Operation, powershell, run_step

from .types import MenuCategory

# chkdsk: 0 = clean, 1 = errors fixed, 2 = cleanup performed; 3 = errors remain.
CHKDSK_OK_CODES = (0, 1, 2)


class RestorePointOperation(Operation):
    label = "Create a system restore point"
    description = "Checkpoint the system before making repairs"
    requires_confirmation = True
    confirm_prompt = "Create a restore point now? System Protection must be enabled on the system drive."

    def execute(self, context) -> None:
        name = f"fixkit {datetime.now():%Y-%m-%d %H:%M}"
        run_step(
            context,
            powershell(
                f"Checkpoint-Computer -Description '{name}' "
                "-RestorePointType MODIFY_SETTINGS -ErrorAction Stop"
            ),
        )


class RepairModule:
    """Integrity scans and repairs."""

    def __init__(self, config: FixConfig):
        self.config = config

    def get_category(self) -> MenuCategory:
        drive = self.config.system_drive
        return MenuCategory(
            title="Diagnostics & Repair",
            description="Check and repair system files and disks",
            operations=[
                RestorePointOperation(),
                CommandOperation(
                    "Run System File Checker",
                    "Verify and repair protected system files (sfc /scannow)",
                    [["sfc", "/scannow"]],
                    requires_confirmation=True,
                    confirm_prompt="Run sfc /scannow? This can take 15 minutes or more.",
                ),
                CommandOperation(
                    "Run component store diagnostics",
                    "Scan the component store for corruption (DISM /ScanHealth)",
                    [["DISM", "/Online", "/Cleanup-Image", "/ScanHealth"]],
                ),
                CommandOperation(
                    "Restore component store health",
                    "Repair the component store from Windows Update (DISM /RestoreHealth)",
                    [["DISM", "/Online", "/Cleanup-Image", "/RestoreHealth"]],
                    requires_confirmation=True,
                    confirm_prompt="Run DISM /RestoreHealth? It downloads replacement files from Windows Update.",
                ),
                CommandOperation(
                    "Check disk",
                    f"Online scan of {drive} for file-system errors (chkdsk /scan)",
                    [["chkdsk", drive, "/scan"]],
                    requires_confirmation=True,
                    confirm_prompt=f"Run chkdsk on {drive}? Disk activity will be high while it runs.",
                    ok_codes=CHKDSK_OK_CODES,
                ),
            ],
        )
