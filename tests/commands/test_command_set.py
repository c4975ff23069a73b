"""Tests for build_command_set."""

from bblctl.commands import Command, build_command_set
from tests.conftest import FakeUsage

EXPECTED_COMMANDS = {
    "help",
    "version",
    "director-address",
    "director-username",
    "director-password",
    "director-ca-cert",
    "ssh-key",
    "env-id",
}


def test_registers_all_commands() -> None:
    assert set(build_command_set(FakeUsage())) == EXPECTED_COMMANDS


def test_commands_satisfy_protocol() -> None:
    for name, command in build_command_set(FakeUsage()).items():
        assert isinstance(command, Command), name
        assert command.summary, name
