"""App — routes one invocation to exactly one command.

Routing order (first match wins):

1. ``help [COMMAND]`` prints the general listing or the command's usage.
2. An unregistered command prints the general listing and fails.
3. ``--help``/``-h`` among the subcommand flags prints the command's usage.
4. ``--version``/``-v`` among the subcommand flags runs the ``version``
   command with no flags and an empty state.
5. Otherwise the command runs with the invocation's flags and state.

A run executes at most one command and prints usage at most once.
Exceptions raised by a command propagate unchanged.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

import structlog

from bblctl.errors import UnknownCommandError
from bblctl.storage.state import State

if TYPE_CHECKING:
    from bblctl.application.configuration import Invocation
    from bblctl.commands.base import Command, CommandSet
    from bblctl.output.usage import UsagePrinter
    from bblctl.storage.store import StateStore

log = structlog.get_logger(__name__)

HELP_COMMAND = "help"
VERSION_COMMAND = "version"
HELP_FLAGS = frozenset({"--help", "-h"})
VERSION_FLAGS = frozenset({"--version", "-v"})


class App:
    """Dispatcher over an immutable command set.

    Constructed once per process with everything it needs; :meth:`run`
    is the only public operation.  Each routing decision is logged at
    DEBUG as a ``dispatch`` event with ``command`` and ``route`` fields.
    """

    def __init__(
        self,
        commands: CommandSet,
        configuration: Invocation,
        state_store: StateStore,
        usage: UsagePrinter,
    ) -> None:
        self._commands = MappingProxyType(dict(commands))
        self._configuration = configuration
        self._state_store = state_store
        self._usage = usage

    @property
    def commands(self) -> MappingProxyType[str, Command]:
        return self._commands

    def run(self) -> None:
        """Dispatch the invocation.

        Raises:
            UnknownCommandError: The requested command, the ``help``
                target, or the implicit ``version`` command is not
                registered.
        """
        name = self._configuration.command
        flags = self._configuration.subcommand_flags

        if name == HELP_COMMAND:
            return self._help(flags)

        command = self._commands.get(name)
        if command is None:
            log.debug("dispatch", command=name, route="unknown")
            self._usage.print()
            raise UnknownCommandError(name)

        if _contains(flags, HELP_FLAGS):
            log.debug("dispatch", command=name, route="command_usage")
            self._usage.print_command_usage(command.usage(), name)
            return None

        if _contains(flags, VERSION_FLAGS):
            version = self._commands.get(VERSION_COMMAND)
            if version is None:
                log.debug("dispatch", command=name, route="version_missing")
                raise UnknownCommandError(VERSION_COMMAND)
            log.debug("dispatch", command=name, route="version")
            return version.execute((), State())

        log.debug("dispatch", command=name, route="execute", flag_count=len(flags))
        return command.execute(flags, self._configuration.state)

    def _help(self, flags: tuple[str, ...]) -> None:
        if not flags:
            log.debug("dispatch", command=HELP_COMMAND, route="usage")
            self._usage.print()
            return

        target = flags[0]
        command = self._commands.get(target)
        if command is None:
            log.debug("dispatch", command=HELP_COMMAND, target=target, route="unknown")
            self._usage.print()
            raise UnknownCommandError(target)

        log.debug("dispatch", command=HELP_COMMAND, target=target, route="command_usage")
        self._usage.print_command_usage(command.usage(), target)


def _contains(flags: tuple[str, ...], wanted: frozenset[str]) -> bool:
    return any(flag in wanted for flag in flags)
