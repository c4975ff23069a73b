"""Exception hierarchy for bblctl.

Every error the tool raises on purpose derives from :class:`BblError`.
The CLI layer maps these to a message on stderr and exit code 1; anything
else is a bug and propagates with its traceback.
"""

from __future__ import annotations


class BblError(Exception):
    """Base class for all bblctl errors."""


class UnknownCommandError(BblError):
    """A requested command name is not in the command set."""

    def __init__(self, command: str) -> None:
        super().__init__(f"unknown command: {command}")
        self.command = command


class StateError(BblError):
    """The persisted state is unreadable or lacks a required value."""


class UsageError(BblError):
    """A command received subcommand flags it does not accept."""
