"""Commands for bbl.

Provides build_command_set(), which assembles the name -> Command
mapping handed to the dispatcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bblctl.commands.base import Command, CommandSet

if TYPE_CHECKING:
    from bblctl.output.usage import UsagePrinter

__all__ = ["Command", "CommandSet", "build_command_set"]


def build_command_set(usage: UsagePrinter) -> dict[str, Command]:
    """Return every command bbl ships, keyed by command name."""
    from bblctl.commands import state_query
    from bblctl.commands.help import Help
    from bblctl.commands.version import Version

    commands: dict[str, Command] = {
        "help": Help(usage),
        "version": Version(),
    }
    for factory in (
        state_query.director_address,
        state_query.director_username,
        state_query.director_password,
        state_query.director_ca_cert,
        state_query.ssh_key,
        state_query.env_id,
    ):
        query = factory()
        commands[query.name] = query
    return commands
