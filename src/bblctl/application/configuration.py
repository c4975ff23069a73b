"""Invocation — the parsed description of one ``bbl`` run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from bblctl.storage.state import State


class GlobalOptions(BaseModel):
    """Global flags given before the command name, frozen after parsing."""

    model_config = {"frozen": True}

    state_dir: Path = Field(default_factory=Path.cwd)
    endpoint_override: str = ""


class Invocation(BaseModel):
    """Command name, its trailing flags, global options and loaded state.

    Attributes:
        command: Requested command name; may be empty or unregistered.
        subcommand_flags: Tokens after the command name, in the order given.
        global_options: Parsed global flags.
        state: State snapshot loaded from the state directory.
    """

    model_config = {"frozen": True}

    command: str = ""
    subcommand_flags: tuple[str, ...] = ()
    global_options: GlobalOptions = Field(default_factory=GlobalOptions)
    state: State = Field(default_factory=State)
