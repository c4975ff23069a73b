"""structlog configuration for bbl.

Logs always go to stderr so stdout stays clean for command output such
as ``bbl director-address``.  Events are key/value pairs; values under
secret-looking keys are masked before rendering, since state snapshots
carry director passwords and private keys.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

REDACTED = "***"
SECRET_KEY_PARTS = ("password", "secret", "private_key", "ssl_private")


def redact_secrets(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask values whose key names a credential."""
    for key in event_dict:
        if any(part in key for part in SECRET_KEY_PARTS) and event_dict[key]:
            event_dict[key] = REDACTED
    return event_dict


def bind_invocation(*, command: str, state_dir: str) -> None:
    """Attach the command and state directory to every later log event."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=command, state_dir=state_dir)


def configure_logging(*, debug: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        debug: Show DEBUG events from ``bblctl`` loggers (routing and
            state I/O). Otherwise only WARNING and above.
        log_json: Render JSON lines instead of the console format.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(logging.WARNING)
    logging.getLogger("bblctl").setLevel(logging.DEBUG if debug else logging.WARNING)
