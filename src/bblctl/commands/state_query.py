"""Commands that print a single value from the loaded state.

Each one reads a field from the snapshot it is given and fails with a
StateError when the field is empty, which almost always means bbl is
pointed at the wrong state directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bblctl.commands.base import reject_flags
from bblctl.errors import StateError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from bblctl.storage.state import State


class StateQuery:
    """Print one state value selected by *getter*.

    Args:
        name: Command name, used in error messages.
        description: Human name of the value, e.g. ``"director address"``.
        getter: Extracts the value from a state snapshot.
    """

    def __init__(self, name: str, description: str, getter: Callable[[State], str]) -> None:
        self.name = name
        self.description = description
        self.summary = f"Prints the {description}"
        self._getter = getter

    def execute(self, subcommand_flags: Sequence[str], state: State) -> None:
        reject_flags(self.name, subcommand_flags)
        value = self._getter(state)
        if not value:
            msg = (
                f"Could not retrieve {self.description}, "
                "please make sure you are targeting the proper state dir."
            )
            raise StateError(msg)
        click.echo(value)

    def usage(self) -> str:
        return self.summary


def director_address() -> StateQuery:
    return StateQuery(
        "director-address", "director address", lambda s: s.bosh.director_address
    )


def director_username() -> StateQuery:
    return StateQuery(
        "director-username", "director username", lambda s: s.bosh.director_username
    )


def director_password() -> StateQuery:
    return StateQuery(
        "director-password", "director password", lambda s: s.bosh.director_password
    )


def director_ca_cert() -> StateQuery:
    return StateQuery(
        "director-ca-cert", "director CA certificate", lambda s: s.bosh.director_ssl_ca
    )


def ssh_key() -> StateQuery:
    return StateQuery("ssh-key", "SSH private key", lambda s: s.key_pair.private_key)


def env_id() -> StateQuery:
    return StateQuery("env-id", "environment ID", lambda s: s.env_id)
