"""Run planned salt invocations with the caller's stdout and stderr."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess

from .command import CommandPlan, Invocation
from .exceptions import CommandFailedError, ExecutableNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["resolve_executable", "run_invocation", "run_plan"]


def resolve_executable(name: str) -> str:
    """Return the full path of ``name`` on PATH."""
    path = shutil.which(name)
    if path is None:
        raise ExecutableNotFoundError(name)
    return path


def run_invocation(invocation: Invocation) -> None:
    """Run one salt command synchronously, raising on failure.

    Output is not captured; salt writes straight to the inherited streams.
    """
    path = resolve_executable(invocation.executable)
    logger.debug("running %s (%s)", shlex.join(invocation.argv), path)
    try:
        subprocess.run(list(invocation.argv), executable=path, check=True)
    except subprocess.CalledProcessError as exc:
        raise CommandFailedError(invocation, f"exit status {exc.returncode}") from exc
    except OSError as exc:
        raise CommandFailedError(invocation, str(exc)) from exc


def run_plan(plan: CommandPlan) -> None:
    """Run every invocation in order, stopping at the first failure."""
    for invocation in plan:
        if invocation.label:
            logger.info("%s", invocation.label)
        run_invocation(invocation)
