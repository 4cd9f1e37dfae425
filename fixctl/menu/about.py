#!/usr/bin/env python3
"""
Help Module

Help/About viewer and the session log viewer.
"""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fixkit import __version__
from fixkit.core.operations import Operation

from .types import MenuCategory


class HelpOperation(Operation):
    label = "Help / About"
    description = "Explain every menu entry"

    def execute(self, context) -> None:
        context.console.print(Panel.fit(
            f"[bold]fixkit repair console[/bold] v{__version__}\n"
            "Runs built-in Windows maintenance tools with logging and a session summary.\n"
            f"Entries marked ⚠️ ask for confirmation; answer [bold]{escape(context.config.confirm_token)}[/bold] to proceed.",
            title="About",
            border_style="cyan",
        ))

        catalog = context.catalog
        for section in catalog.sections:
            table = Table(title=section.title, title_justify="left", show_header=False, box=None)
            table.add_column("Key", style="cyan", width=4)
            table.add_column("Operation", style="white", min_width=30)
            table.add_column("Description", style="dim")
            for selector in section.selectors:
                entry = catalog.entry(selector)
                if entry is None:
                    continue
                marker = " ⚠️" if entry.operation.requires_confirmation else ""
                table.add_row(f"{entry.selector}.", f"{entry.label}{marker}", entry.operation.description)
            context.console.print(table)
            context.console.print()


class LogViewOperation(Operation):
    label = "View session log"
    description = "Show the most recent lines of this session's log file"

    def execute(self, context) -> None:
        logger = context.logger
        location = str(logger.path) if logger.path else "console only"
        context.console.print(f"[bold]Log file:[/bold] {escape(location)}")
        lines = logger.tail(context.config.log_view_lines)
        if not lines:
            context.console.print("[yellow]Log is empty[/yellow]")
            return
        for line in lines:
            context.console.print(escape(line), highlight=False)


class HelpModule:
    """Help and log viewing."""

    def get_category(self) -> MenuCategory:
        return MenuCategory(
            title="Help",
            description="About this console and the session log",
            operations=[HelpOperation(), LogViewOperation()],
            selectors=["H", "L"],
        )
