#!/usr/bin/env python3
"""
Core Menu Framework

The repair console main loop: privilege check, log file setup, catalog
rendering, dispatch through the operation wrapper, and the session summary
written on quit.
"""

import os
from pathlib import Path
from typing import Callable, List, Optional

from rich.align import Align
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from fixkit import __version__
from fixkit.core.catalog import QUIT_SELECTOR, OperationCatalog, normalize_selector
from fixkit.core.context import RunContext
from fixkit.core.errors import PrivilegeError
from fixkit.core.outcome import Outcome
from fixkit.core.privilege import PRIVILEGE_MESSAGE, is_admin
from fixkit.core.runner import invoke
from fixkit.core.session_log import validate_log_path

from fixctl.menu.about import HelpModule
from fixctl.menu.maintenance import MaintenanceModule
from fixctl.menu.network import NetworkModule
from fixctl.menu.repair import RepairModule
from fixctl.menu.system import SystemModule
from fixctl.menu.types import LoopState, MenuCategory
from fixctl.menu.update import UpdateModule

EXIT_OK = 0
EXIT_PRIVILEGE = 1

SUMMARY_HEADING = "Session Summary"


def build_categories(context: RunContext) -> List[MenuCategory]:
    """Instantiate every menu module in display order."""
    config = context.config
    windows_dir = Path(os.environ.get("SystemRoot", r"C:\Windows"))
    return [
        SystemModule(config).get_category(),
        RepairModule(config).get_category(),
        UpdateModule(config, windows_dir).get_category(),
        NetworkModule(config).get_category(),
        MaintenanceModule(config).get_category(),
        HelpModule().get_category(),
    ]


def build_catalog(context: RunContext, categories: Optional[List[MenuCategory]] = None) -> OperationCatalog:
    """Register every operation in the context's catalog and close it."""
    catalog = context.catalog
    number = 1
    for category in categories if categories is not None else build_categories(context):
        selectors = []
        for idx, operation in enumerate(category.operations):
            if category.selectors:
                selector = category.selectors[idx]
            else:
                selector = str(number)
                number += 1
            catalog.register(selector, operation.label, operation)
            selectors.append(selector)
        catalog.add_section(category.title, category.description, selectors)
    catalog.close()
    return catalog


class RepairConsole:
    """Main menu loop for the repair console."""

    def __init__(
        self,
        context: RunContext,
        privilege_check: Callable[[], bool] = is_admin,
        log_file: Optional[str] = None,
    ):
        self.context = context
        self.console = context.console
        self.privilege_check = privilege_check
        self.log_file = log_file
        self.state = LoopState.RENDERING
        self._notice: Optional[str] = None

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Verify privileges and open the log file.

        Raises PrivilegeError when the process is not elevated; no log file
        is created in that case.
        """
        if not self.privilege_check():
            raise PrivilegeError(PRIVILEGE_MESSAGE)
        self.context.admin_privilege_confirmed = True

        path = self._resolve_log_path()
        self.context.log_file_path = self.context.logger.open(path)
        self.context.logger.info(f"Session started (fixkit v{__version__})")

    def _refuse(self, exc: PrivilegeError) -> int:
        self.context.logger.error(str(exc))
        self.context.pause("Press Enter to exit")
        self.state = LoopState.TERMINATED
        return EXIT_PRIVILEGE

    def _resolve_log_path(self) -> Optional[Path]:
        text = self.log_file
        if text is None:
            try:
                text = self.context.ask("Log file path [dim](Enter for default)[/dim]")
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                text = ""
        if not text or not text.strip():
            return None
        try:
            return validate_log_path(text)
        except ValueError as exc:
            self.console.print(f"[yellow]{escape(str(exc))}; using the default log location[/yellow]")
            return None

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def run(self) -> int:
        """Run the session until the quit selector is chosen."""
        try:
            self.start()
        except PrivilegeError as exc:
            return self._refuse(exc)

        try:
            while True:
                self.state = LoopState.RENDERING
                self._render()

                self.state = LoopState.AWAITING_INPUT
                choice = self._read_choice()

                if normalize_selector(choice) == QUIT_SELECTOR:
                    break

                self.state = LoopState.DISPATCHING
                self.dispatch(choice)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Interrupted by user. Exiting...[/yellow]")
        finally:
            self._finish()
        return EXIT_OK

    def run_single(self, selector: str) -> int:
        """Run one operation, then write the summary as if the operator quit."""
        try:
            self.start()
        except PrivilegeError as exc:
            return self._refuse(exc)
        try:
            self.state = LoopState.DISPATCHING
            self.dispatch(selector)
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Interrupted by user. Exiting...[/yellow]")
        finally:
            self._finish()
        return EXIT_OK

    def dispatch(self, choice: str) -> Optional[Outcome]:
        """Invoke the operation for ``choice``; None when the selector is unknown."""
        operation = self.context.catalog.lookup(choice)
        if operation is None:
            self._notice = f"Invalid choice: {choice.strip() or '(empty)'}"
            return None
        return invoke(operation, self.context)

    def _read_choice(self) -> str:
        try:
            return self.context.ask("Select option")
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return QUIT_SELECTOR

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render(self) -> None:
        if self.context.config.clear_screen:
            self.console.clear()
        self._show_banner()

        if self._notice:
            self.console.print(f"[red]{escape(self._notice)}[/red]")
            self.console.print()
            self._notice = None

        title = "Main Menu"
        self.console.print(Text(title, style="bold blue"))
        self.console.print(Text("─" * len(title), style="blue"))
        for entry in self.context.catalog.ordered_entries():
            marker = " [yellow]⚠️[/yellow]" if entry.operation.requires_confirmation else ""
            self.console.print(f"[cyan]{entry.selector}.[/cyan] {escape(entry.label)}{marker}")
        self.console.print()
        self.console.print(f"[cyan]{QUIT_SELECTOR}.[/cyan] Quit")
        self.console.print()

    def _show_banner(self) -> None:
        log_path = self.context.log_file_path
        lines = [
            Text("🛠  WORKSTATION REPAIR CONSOLE", style="bold white"),
            Text(f"v{__version__}", style="dim white"),
            Text(f"Log: {log_path if log_path else 'console only'}", style="dim"),
            Text(f"Actions this session: {len(self.context.ledger)}", style="dim"),
        ]
        banner = Panel(
            Text("\n").join(lines),
            border_style="cyan",
            padding=(0, 2),
            width=64,
        )
        self.console.print(Align.center(banner))
        self.console.print()

    # ------------------------------------------------------------------
    # Quit
    # ------------------------------------------------------------------
    def _summarize(self) -> None:
        logger = self.context.logger
        lines = self.context.ledger.render_lines()

        self.console.print(Panel(
            "\n".join(escape(line) for line in lines),
            title=SUMMARY_HEADING,
            border_style="cyan",
        ))
        logger.info(f"===== {SUMMARY_HEADING} =====")
        for line in lines:
            logger.info(line)
        logger.info("Exiting fixkit")
        location = self.context.log_file_path or "console only (no log file)"
        self.console.print(f"[bold]Log file:[/bold] {escape(str(location))}")
        logger.close()

    def _finish(self) -> None:
        if self.state is LoopState.TERMINATED:
            return
        self.state = LoopState.SUMMARIZING
        self._summarize()
        self.state = LoopState.TERMINATED
