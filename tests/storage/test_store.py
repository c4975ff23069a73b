"""Tests for StateStore load/save."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bblctl.errors import StateError
from bblctl.storage.state import STATE_VERSION, State
from bblctl.storage.store import STATE_FILENAME, StateStore


class TestLoad:
    def test_missing_file_returns_empty_state(self, tmp_path: Path) -> None:
        assert StateStore().load(tmp_path) == State()

    def test_missing_directory_returns_empty_state(self, tmp_path: Path) -> None:
        assert StateStore().load(tmp_path / "nope") == State()

    def test_loads_saved_state(self, state_dir: Path, populated_state: State) -> None:
        assert StateStore().load(state_dir) == populated_state

    def test_partial_file_fills_defaults(self, tmp_path: Path) -> None:
        (tmp_path / STATE_FILENAME).write_text('{"env_id": "some-env"}', encoding="utf-8")
        state = StateStore().load(tmp_path)
        assert state.env_id == "some-env"
        assert state.version == STATE_VERSION
        assert state.bosh.director_address == ""

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        (tmp_path / STATE_FILENAME).write_text("{not json", encoding="utf-8")
        with pytest.raises(StateError, match="Invalid state file"):
            StateStore().load(tmp_path)

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        (tmp_path / STATE_FILENAME).write_bytes(b'{"env_id": "\xff\xfe"}')
        with pytest.raises(StateError, match="Invalid state file"):
            StateStore().load(tmp_path)

    def test_wrong_types_raise(self, tmp_path: Path) -> None:
        (tmp_path / STATE_FILENAME).write_text('{"bosh": "oops"}', encoding="utf-8")
        with pytest.raises(StateError, match="Invalid state file"):
            StateStore().load(tmp_path)

    def test_newer_version_raises(self, tmp_path: Path) -> None:
        payload = {"version": STATE_VERSION + 1}
        (tmp_path / STATE_FILENAME).write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(StateError, match="version"):
            StateStore().load(tmp_path)


class TestSave:
    def test_writes_json(self, tmp_path: Path, populated_state: State) -> None:
        StateStore().save(tmp_path, populated_state)
        raw = (tmp_path / STATE_FILENAME).read_text(encoding="utf-8")
        assert raw.endswith("\n")
        data = json.loads(raw)
        assert data["env_id"] == populated_state.env_id
        assert data["key_pair"]["private_key"] == "some-private-key"

    def test_creates_directory(self, tmp_path: Path, populated_state: State) -> None:
        target = tmp_path / "nested" / "env"
        StateStore().save(target, populated_state)
        assert (target / STATE_FILENAME).is_file()

    def test_empty_state_removes_file(self, state_dir: Path) -> None:
        StateStore().save(state_dir, State())
        assert not (state_dir / STATE_FILENAME).exists()

    def test_empty_state_without_file_is_noop(self, tmp_path: Path) -> None:
        StateStore().save(tmp_path, State())
        assert list(tmp_path.iterdir()) == []

    def test_save_then_load(self, tmp_path: Path, populated_state: State) -> None:
        store = StateStore()
        updated = populated_state.model_copy(update={"env_id": "other-env"})
        store.save(tmp_path, updated)
        assert store.load(tmp_path).env_id == "other-env"
