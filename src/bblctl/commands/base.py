"""Command — the contract every dispatchable operation implements."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from bblctl.errors import UsageError

if TYPE_CHECKING:
    from bblctl.storage.state import State


@runtime_checkable
class Command(Protocol):
    """A named unit of work the dispatcher can run or describe.

    ``execute`` signals failure by raising; the dispatcher propagates the
    exception untouched.  ``usage`` must be free of side effects.
    """

    def execute(self, subcommand_flags: Sequence[str], state: State) -> None: ...

    def usage(self) -> str: ...


CommandSet = Mapping[str, Command]


def reject_flags(command: str, subcommand_flags: Sequence[str]) -> None:
    """Raise UsageError if a flagless command received any tokens."""
    if subcommand_flags:
        unexpected = " ".join(subcommand_flags)
        msg = f"{command} does not accept arguments (got: {unexpected})"
        raise UsageError(msg)
