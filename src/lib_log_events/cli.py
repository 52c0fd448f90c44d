"""CLI adapter for ``lib_log_events`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators try chains from a shell: print metadata, run the sample chains,
or emit a single chain assembled from command line options.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root group wiring traceback and ``.env`` preferences.
* :func:`cli_info` – prints the metadata banner.
* :func:`cli_demo` – runs :func:`lib_log_events.demo.logdemo`.
* :func:`cli_emit` – emits one chain on the demo logger.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. Mode options come from flags or ``LOG_EVENTS_<MODE>``
environment variables (see :mod:`lib_log_events.config`); errors are funnelled
through ``lib_cli_exit_tools`` so exit codes stay consistent.
"""

from __future__ import annotations

import json
import os
import sys
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as log_config
from .adapters import RichConsoleRenderer
from .demo import DEMO_MODES, DEMO_STYLES, build_demo_logger, logdemo
from .domain import EmissionRecord

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.name} version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load a nearby .env before reading mode flags (also via {log_config.DOTENV_ENV_VAR})",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global preferences for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``; may load ``.env``
        into ``os.environ``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: Optional[bool] = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print distribution metadata so users can confirm installation."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--verbose/--no-verbose", default=None, help="Enable the verbose mode (default: LOG_EVENTS_VERBOSE)")
@click.option("--debug/--no-debug", default=None, help="Enable the debug mode (default: LOG_EVENTS_DEBUG)")
def cli_demo(verbose: Optional[bool], debug: Optional[bool]) -> None:
    """Run the sample chains and print the records allowed by the mode flags."""

    flags = log_config.mode_flags(DEMO_MODES)
    resolved_verbose = flags["verbose"] if verbose is None else verbose
    resolved_debug = flags["debug"] if debug is None else debug
    published = logdemo(verbose=resolved_verbose, debug=resolved_debug)
    shown = sum(1 for entry in published if entry["shown"])
    click.echo(f"published {len(published)} record(s), shown {shown} (verbose={resolved_verbose}, debug={resolved_debug})")


@cli.command("emit", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.argument("message", nargs=-1, required=True)
@click.option("--mode", "-m", "modes", multiple=True, help="Mode to activate before the emitter (repeatable)")
@click.option("--style", "-s", "styles", multiple=True, help="Style to queue before the emitter (repeatable)")
@click.option("--json/--no-json", "as_json", default=False, help="Print the published records as JSON instead")
def cli_emit(name: str, message: Sequence[str], modes: Sequence[str], styles: Sequence[str], as_json: bool) -> None:
    """Emit MESSAGE through emitter NAME on the demo logger.

    Modes and styles are applied in the order given, e.g.
    ``emit warn "disk full" -m not_ -m verbose -s bold``. Mode flags for
    rendering come from ``LOG_EVENTS_<MODE>`` environment variables.
    """

    logger = build_demo_logger()
    for mode in modes:
        if mode not in logger.modes:
            raise click.BadParameter(f"unknown mode {mode!r}; known: {', '.join(logger.mode_keys)}", param_hint="--mode")
    for style in styles:
        if style not in logger.styles:
            raise click.BadParameter(f"unknown style {style!r}; known: {', '.join(logger.style_keys)}", param_hint="--style")

    published: list[EmissionRecord] = []
    if as_json:
        logger.on("*", lambda _name, record: published.append(record))
    else:
        options = log_config.mode_flags(DEMO_MODES)
        logger.on("*", RichConsoleRenderer(options, DEMO_STYLES))

    for mode in modes:
        getattr(logger, mode)
    for style in styles:
        getattr(logger, style)
    logger.emit(name, *message)

    if as_json:
        click.echo(json.dumps([record.to_dict() for record in published], indent=2))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=__init__conf__.shell_command,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
