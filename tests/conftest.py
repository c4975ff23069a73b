"""Shared pytest fixtures and recording fakes for bblctl tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from click.testing import CliRunner

from bblctl.storage.state import AWS, BOSH, KeyPair, State
from bblctl.storage.store import StateStore

# ---------------------------------------------------------------------------
# Recording fakes
# ---------------------------------------------------------------------------


@dataclass
class ExecuteCall:
    """Arguments of one ``FakeCommand.execute`` call."""

    subcommand_flags: Sequence[str]
    state: State


@dataclass
class FakeCommand:
    """Command that records its calls and returns or raises on demand."""

    usage_text: str = ""
    error: Exception | None = None
    execute_calls: list[ExecuteCall] = field(default_factory=list)
    usage_call_count: int = 0

    def execute(self, subcommand_flags: Sequence[str], state: State) -> None:
        self.execute_calls.append(ExecuteCall(subcommand_flags, state))
        if self.error is not None:
            raise self.error

    def usage(self) -> str:
        self.usage_call_count += 1
        return self.usage_text


@dataclass
class FakeUsage:
    """Usage printer that records what it was asked to print."""

    print_call_count: int = 0
    command_usage_calls: list[tuple[str, str]] = field(default_factory=list)

    def print(self) -> None:
        self.print_call_count += 1

    def print_command_usage(self, message: str, command: str) -> None:
        self.command_usage_calls.append((message, command))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def populated_state() -> State:
    """A state snapshot with director and key pair values filled in."""
    return State(
        env_id="bbl-env-lake-2026-10-17t00-00z",
        aws=AWS(
            access_key_id="some-access-key-id",
            secret_access_key="some-secret-access-key",
            region="some-region",
        ),
        key_pair=KeyPair(
            name="some-keypair-name",
            public_key="some-public-key",
            private_key="some-private-key",
        ),
        bosh=BOSH(
            director_address="https://10.0.0.6:25555",
            director_username="admin",
            director_password="some-password",
            director_ssl_ca="some-ca-cert",
        ),
    )


@pytest.fixture
def state_dir(tmp_path: Path, populated_state: State) -> Path:
    """Temporary state directory containing ``bbl-state.json``."""
    StateStore().save(tmp_path, populated_state)
    return tmp_path
