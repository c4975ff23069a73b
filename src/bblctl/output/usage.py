"""Usage — renders the command listing and per-command help.

The listing is built from the command set, so registering a command is
enough for it to appear.  A command's one-line description comes from
its ``summary`` attribute when it has one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import click
from rich.markup import escape
from rich.table import Table

from bblctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from bblctl.commands.base import CommandSet

GLOBAL_OPTIONS: list[tuple[str, str]] = [
    ("--help, -h", "Print usage"),
    ("--version, -v", "Print version"),
    ("--state-dir", "Directory containing bbl-state.json"),
    ("--endpoint-override", "Override the AWS endpoint URL"),
    ("--debug", "Print debug logs to stderr"),
    ("--log-json", "Emit logs as JSON lines"),
]


class UsagePrinter(Protocol):
    """What the dispatcher needs from a usage renderer."""

    def print(self) -> None: ...

    def print_command_usage(self, message: str, command: str) -> None: ...


class Usage:
    """Render usage text to stdout.

    Args:
        commands: Command set whose names and summaries make up the
            listing.
        no_color: Disable ANSI styling.
    """

    def __init__(self, commands: CommandSet, *, no_color: bool = False) -> None:
        self._commands = commands
        self._no_color = no_color

    def render(self) -> str:
        """Return the general usage listing as text."""
        console = create_console(no_color=self._no_color)
        console.print("[bbl.heading]Usage:[/]")
        console.print("  bbl [GLOBAL OPTIONS] COMMAND [OPTIONS]")
        console.print()
        console.print("[bbl.heading]Global Options:[/]")
        console.print(_two_columns(GLOBAL_OPTIONS, style="bbl.flag"))
        console.print("[bbl.heading]Commands:[/]")
        rows = [
            (name, getattr(self._commands[name], "summary", ""))
            for name in sorted(self._commands)
        ]
        console.print(_two_columns(rows, style="bbl.command"))
        return get_output(console).rstrip() + "\n"

    def render_command_usage(self, message: str, command: str) -> str:
        """Return the usage text for a single command."""
        console = create_console(no_color=self._no_color)
        console.print(f"[bbl.heading]\\[{escape(command)} command options][/]")
        if message:
            console.print(escape(message))
        return get_output(console).rstrip() + "\n"

    def print(self) -> None:
        click.echo(self.render(), nl=False)

    def print_command_usage(self, message: str, command: str) -> None:
        click.echo(self.render_command_usage(message, command), nl=False)


def _two_columns(rows: list[tuple[str, str]], *, style: str) -> Table:
    table = Table(box=None, show_header=False, padding=(0, 2, 0, 2))
    table.add_column(style=style, no_wrap=True)
    table.add_column()
    for left, right in rows:
        table.add_row(escape(left), escape(right))
    return table
