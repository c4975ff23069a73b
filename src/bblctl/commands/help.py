"""Command: print the general usage listing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bblctl.commands.base import reject_flags

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bblctl.output.usage import UsagePrinter
    from bblctl.storage.state import State


class Help:
    """Prints the command listing when run directly.

    ``bbl help COMMAND`` never reaches this class; the dispatcher
    answers it from the target command's own usage text.
    """

    summary = "Print usage"

    def __init__(self, usage: UsagePrinter) -> None:
        self._usage = usage

    def execute(self, subcommand_flags: Sequence[str], state: State) -> None:
        reject_flags("help", subcommand_flags)
        self._usage.print()

    def usage(self) -> str:
        return "Prints helpful message for the given command"
