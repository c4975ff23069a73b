"""Command: print the bbl version."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bblctl import __version__
from bblctl.commands.base import reject_flags

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bblctl.storage.state import State


class Version:
    summary = "Print version"

    def __init__(self, version: str = __version__) -> None:
        self._version = version

    def execute(self, subcommand_flags: Sequence[str], state: State) -> None:
        reject_flags("version", subcommand_flags)
        click.echo(f"bbl {self._version}")

    def usage(self) -> str:
        return "Prints version"
