"""Workstation repair console CLI.

``fixctl`` (or ``fixctl menu``) starts the interactive console. ``list``
prints the operation catalog and ``run`` executes a single operation through
the same privilege check, confirmation, logging and summary as the menu.
"""
from __future__ import annotations

import argparse
from typing import Callable, Iterable, Optional, TextIO

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fixkit.core.config import load_config
from fixkit.core.context import RunContext
from fixkit.core.errors import CatalogError, SelectionError
from fixkit.core.privilege import is_admin
from fixctl.menu.core import EXIT_OK, RepairConsole, build_catalog

EXIT_USAGE = 2


def build_context(
    config_path: Optional[str],
    console: Optional[Console] = None,
    input_stream: Optional[TextIO] = None,
) -> RunContext:
    """Load configuration and build a context with a closed catalog."""
    config = load_config(config_path)
    context = RunContext.create(config, console=console, input_stream=input_stream)
    build_catalog(context)
    return context


def cmd_menu(
    config_path: Optional[str],
    log_file: Optional[str],
    no_clear: bool = False,
    console: Optional[Console] = None,
    input_stream: Optional[TextIO] = None,
    privilege_check: Callable[[], bool] = is_admin,
) -> int:
    """Launch the interactive repair console."""
    context = build_context(config_path, console=console, input_stream=input_stream)
    if no_clear:
        context.config.raw["clear_screen"] = False
    return RepairConsole(context, privilege_check=privilege_check, log_file=log_file).run()


def cmd_list(config_path: Optional[str], console: Optional[Console] = None) -> int:
    """Print the catalog in menu order."""
    context = build_context(config_path, console=console)
    table = Table(title="Repair operations", title_justify="left")
    table.add_column("Key", style="cyan", justify="right")
    table.add_column("Operation", style="white")
    table.add_column("Confirm", justify="center")
    table.add_column("Description", style="dim")
    for entry in context.catalog.ordered_entries():
        operation = entry.operation
        table.add_row(
            entry.selector,
            escape(entry.label),
            "⚠️" if operation.requires_confirmation else "",
            escape(operation.description),
        )
    context.console.print(table)
    return EXIT_OK


def cmd_run(
    selector: str,
    config_path: Optional[str],
    log_file: Optional[str],
    console: Optional[Console] = None,
    input_stream: Optional[TextIO] = None,
    privilege_check: Callable[[], bool] = is_admin,
) -> int:
    """Run one catalog operation and print the session summary."""
    context = build_context(config_path, console=console, input_stream=input_stream)
    try:
        context.catalog.require(selector)
    except SelectionError as exc:
        context.console.print(f"[red]{escape(str(exc))}[/red]")
        return EXIT_USAGE
    repair_console = RepairConsole(context, privilege_check=privilege_check, log_file=log_file)
    return repair_console.run_single(selector)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Windows workstation repair console")
    parser.add_argument("--config", help="Path to fixkit YAML configuration (default: packaged fixkit.yaml or FIXKIT_CONFIG_PATH)")
    sub = parser.add_subparsers(dest="command")

    p_menu = sub.add_parser("menu", help="Launch the interactive repair console (default)")
    p_menu.add_argument("--log-file", help="Session log path (skips the log path prompt)")
    p_menu.add_argument("--no-clear", action="store_true", help="Do not clear the screen between menus")

    sub.add_parser("list", help="List available operations and exit")

    p_run = sub.add_parser("run", help="Run a single operation by its menu key")
    p_run.add_argument("selector", help="Menu key, e.g. 3 or H")
    p_run.add_argument("--log-file", help="Session log path (skips the log path prompt)")

    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        if args.command == "list":
            return cmd_list(args.config)
        if args.command == "run":
            return cmd_run(args.selector, args.config, getattr(args, "log_file", None))
        return cmd_menu(
            args.config,
            getattr(args, "log_file", None),
            no_clear=bool(getattr(args, "no_clear", False)),
        )
    except (CatalogError, ValueError, OSError, yaml.YAMLError) as exc:
        # Startup configuration problems: bad YAML, unreadable config, catalog clashes.
        Console(stderr=True).print(f"[red]Error starting repair console: {escape(str(exc))}[/red]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
