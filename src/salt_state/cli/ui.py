"""Console output helpers for the ``state`` command."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

USAGE = """usage: state [-cdgmqv] [-f file] action [args...]
state is a wrapper for commonly used salt functions. It defaults to
using salt-call --local for local state testing and management.

Actions:
	sls		Apply a salt state. This requires at least one argument
			that is the state to apply.
	up		Run a highstate.
	highstate	Run a highstate.
	sync		Sync Salt and Pillar.
	clear		Clear the minion cache.

Flags:
	-c	Turn on coloured output.
	-d	Turn on debug logging for this wrapper.
	-f	Also write output to the specified file.
	-g	The Salt command should be global (e.g. use salt instead
		of salt-call); the first argument after the action should
		be a target spec; implies -m.
	-m	Use the salt master (e.g. no --local).
	-q	Quiet mode: only show warning and error log messages.
	-v	Show full Salt output, instead of just changes.
"""

PACKAGE_LOGGER = "salt_state"

__all__ = ["USAGE", "print_usage", "report_error", "configure_logging"]


def print_usage(*, err: bool = False) -> None:
    """Write the usage text to stdout, or stderr when ``err`` is set."""
    typer.echo(USAGE, err=err, nl=False)


def report_error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a stderr rich handler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
