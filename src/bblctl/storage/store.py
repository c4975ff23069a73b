"""StateStore — load and save ``bbl-state.json`` in a state directory.

The store is the only component that touches the state file.  Commands
receive a frozen :class:`~bblctl.storage.state.State` snapshot and hand a
derived snapshot back to :meth:`StateStore.save` when they change it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from bblctl.errors import StateError
from bblctl.storage.state import STATE_VERSION, State

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

STATE_FILENAME = "bbl-state.json"


class StateStore:
    """Read and write the state file inside a state directory."""

    filename = STATE_FILENAME

    def path_for(self, state_dir: Path) -> Path:
        return state_dir / self.filename

    def load(self, state_dir: Path) -> State:
        """Load the state snapshot from *state_dir*.

        A missing file yields the zero-value ``State()``.

        Raises:
            StateError: The file cannot be read, is not valid UTF-8 JSON,
                does not match the schema, or was written by a newer
                version of bbl.
        """
        path = self.path_for(state_dir)
        if not path.is_file():
            logger.debug("No state file at %s, using empty state", path)
            return State()

        try:
            raw = path.read_bytes()
        except OSError as exc:
            msg = f"Could not read state file {path}: {exc.strerror}"
            raise StateError(msg) from exc

        try:
            state = State.model_validate_json(raw)
        except ValidationError as exc:
            msg = f"Invalid state file {path}: {exc.error_count()} error(s)"
            raise StateError(msg) from exc

        if state.version > STATE_VERSION:
            msg = (
                f"State file {path} has version {state.version}, "
                f"this bbl supports up to {STATE_VERSION}"
            )
            raise StateError(msg)

        logger.debug("Loaded state from %s", path)
        return state

    def save(self, state_dir: Path, state: State) -> None:
        """Persist *state* to *state_dir*.

        Saving the zero-value state removes the file instead, so a
        destroyed environment leaves no stale state behind.
        """
        path = self.path_for(state_dir)
        if state.is_empty:
            if path.exists():
                path.unlink()
                logger.debug("Removed state file %s", path)
            return

        state_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(state.model_dump_json(indent=2) + "\n", encoding="utf-8")
        logger.debug("Saved state to %s", path)
