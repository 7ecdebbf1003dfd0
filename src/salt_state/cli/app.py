"""Typer application for the ``state`` command."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from salt_state import __version__
from salt_state.core.command import Flags, build_plan, resolve_action
from salt_state.core.config import load_config
from salt_state.core.exceptions import StateError, UsageError
from salt_state.core.runner import run_plan

from .ui import configure_logging, print_usage, report_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="state",
    help="Wrapper for commonly used salt functions.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"state {__version__}")
        raise typer.Exit(0)


@app.command(
    context_settings={
        "help_option_names": [],
        "allow_interspersed_args": False,
    },
)
def state(
    colour: bool = typer.Option(False, "-c", help="Turn on coloured output."),
    debug: bool = typer.Option(False, "-d", help="Turn on debug logging."),
    out_file: Optional[str] = typer.Option(None, "-f", metavar="FILE", help="Also write output to FILE."),
    global_mode: bool = typer.Option(False, "-g", help="Global salt command; first ARG is the target."),
    use_master: bool = typer.Option(False, "-m", help="Use the salt master."),
    quiet: bool = typer.Option(False, "-q", help="Only show warnings and errors in logs."),
    full_output: bool = typer.Option(False, "-v", help="Show full output."),
    show_help: bool = typer.Option(False, "-h", "--help", help="Show usage and exit."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    action: Optional[str] = typer.Argument(None, metavar="ACTION"),
    args: list[str] | None = typer.Argument(None, metavar="[ARGS...]"),
) -> None:
    """Run salt-call (or salt with -g) for a common action."""
    configure_logging(debug)

    if show_help:
        print_usage()
        raise typer.Exit(0)

    flags = Flags(
        colour=colour,
        debug=debug,
        full_output=full_output,
        global_mode=global_mode,
        use_master=use_master,
        quiet=quiet,
        out_file=out_file,
    )

    try:
        resolve_action(flags, action, args or ())
        config = load_config()
        plan = build_plan(
            config.apply_defaults(flags),
            action,
            args or (),
            local_binary=config.local_binary,
            global_binary=config.global_binary,
        )
        run_plan(plan)
    except UsageError as exc:
        logger.debug("showing usage: %s", exc.reason)
        print_usage(err=exc.to_stderr)
        raise typer.Exit(exc.exit_code) from exc
    except StateError as exc:
        report_error(str(exc))
        raise typer.Exit(exc.exit_code) from exc


def main() -> None:
    app()
