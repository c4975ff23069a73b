"""Unified settings — CLI flags and environment variables in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BBL_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from bblctl.application.configuration import GlobalOptions


class BblSettings(BaseSettings):
    """Settings for one bbl run, frozen after construction.

    Attributes:
        state_dir: Directory holding ``bbl-state.json``.
        endpoint_override: Alternate AWS endpoint URL.
        debug: Emit DEBUG logs for bblctl.
        log_json: Emit logs as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BBL_",
    }

    state_dir: Path = Field(default_factory=Path.cwd)
    endpoint_override: str = ""
    debug: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> BblSettings:
        """Build settings from CLI flags.

        Flags left as ``None`` are dropped so the environment and
        defaults can supply them.
        """
        return cls(**{key: value for key, value in cli_flags.items() if value is not None})

    def global_options(self) -> GlobalOptions:
        return GlobalOptions(
            state_dir=self.state_dir,
            endpoint_override=self.endpoint_override,
        )
