"""Root CLI command for bbl: global flags, state loading and dispatch.

Click parses only the global options in front of the command name.
Everything from the command name on is handed to the dispatcher
untouched, which owns help/version handling and command routing.
"""

from __future__ import annotations

import click

from bblctl.application import App, Invocation
from bblctl.application.app import HELP_COMMAND, HELP_FLAGS, VERSION_COMMAND, VERSION_FLAGS
from bblctl.commands import Command, build_command_set
from bblctl.config.logging import bind_invocation, configure_logging
from bblctl.config.settings import BblSettings
from bblctl.errors import BblError
from bblctl.output.usage import Usage
from bblctl.storage.state import State
from bblctl.storage.store import StateStore

def needs_state(command: str, subcommand_flags: tuple[str, ...]) -> bool:
    """Whether dispatch can reach a command that reads the loaded state.

    Help and version routes never see the invocation state, so a broken
    state file must not stop them.
    """
    if command in (HELP_COMMAND, VERSION_COMMAND):
        return False
    return not any(flag in HELP_FLAGS or flag in VERSION_FLAGS for flag in subcommand_flags)


def build_invocation(
    args: tuple[str, ...],
    *,
    help_flag: bool = False,
    version_flag: bool = False,
) -> tuple[str, tuple[str, ...]]:
    """Split raw positional args into ``(command, subcommand_flags)``.

    Global ``--help`` turns the whole line into ``help [COMMAND]`` and
    global ``--version`` into ``version``; no command at all means help.
    """
    if help_flag:
        return "help", args[:1]
    if version_flag:
        return "version", ()
    if not args:
        return "help", ()
    return args[0], args[1:]


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    },
)
@click.option("-h", "--help", "help_flag", is_flag=True, help="Print usage.")
@click.option("-v", "--version", "version_flag", is_flag=True, help="Print version.")
@click.option(
    "--state-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory containing bbl-state.json.",
)
@click.option("--endpoint-override", default=None, help="Override the AWS endpoint URL.")
@click.option("--debug", is_flag=True, help="Print debug logs to stderr.")
@click.option("--log-json", is_flag=True, help="Emit logs as JSON lines.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(
    help_flag: bool,
    version_flag: bool,
    state_dir: str | None,
    endpoint_override: str | None,
    debug: bool,
    log_json: bool,
    args: tuple[str, ...],
) -> None:
    """bbl — BOSH bootloader."""
    settings = BblSettings.from_cli(
        state_dir=state_dir,
        endpoint_override=endpoint_override,
        debug=debug or None,
        log_json=log_json or None,
    )
    configure_logging(debug=settings.debug, log_json=settings.log_json)

    command, subcommand_flags = build_invocation(
        args, help_flag=help_flag, version_flag=version_flag
    )
    bind_invocation(command=command, state_dir=str(settings.state_dir))

    # Usage reads the mapping lazily, so it may be filled after construction.
    commands: dict[str, Command] = {}
    usage = Usage(commands)
    commands.update(build_command_set(usage))

    store = StateStore()
    try:
        if needs_state(command, subcommand_flags):
            state = store.load(settings.state_dir)
        else:
            state = State()

        configuration = Invocation(
            command=command,
            subcommand_flags=subcommand_flags,
            global_options=settings.global_options(),
            state=state,
        )
        App(commands, configuration, store, usage).run()
    except BblError as exc:
        raise click.ClickException(str(exc)) from exc
