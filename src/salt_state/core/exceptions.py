"""Exceptions raised while planning and running salt invocations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .command import Invocation


class StateError(RuntimeError):
    """Base class for all wrapper failures."""

    exit_code = 1


class UsageError(StateError):
    """Raised when the usage text should be shown instead of running salt.

    ``exit_code`` is 0 when usage is informational (no action, unknown
    action) and 1 when the command line is incomplete. ``to_stderr`` picks
    the stream the usage text is written to.
    """

    def __init__(self, reason: str, *, exit_code: int = 1, to_stderr: bool = True) -> None:
        super().__init__(reason)
        self.reason = reason
        self.exit_code = exit_code
        self.to_stderr = to_stderr


class ConfigError(StateError):
    """Raised when the configuration file cannot be used."""


class ExecutableNotFoundError(StateError):
    """Raised when a salt binary is not on the search path."""

    def __init__(self, name: str) -> None:
        super().__init__(f"failed to find {name} (is salt installed?)")
        self.name = name


class CommandFailedError(StateError):
    """Raised when a salt invocation exits non-zero or cannot be started."""

    def __init__(self, invocation: Invocation, reason: str) -> None:
        if invocation.label:
            message = f"failed to {invocation.label} (err = {reason})"
        else:
            message = reason
        super().__init__(message)
        self.invocation = invocation
        self.reason = reason


__all__ = [
    "StateError",
    "UsageError",
    "ConfigError",
    "ExecutableNotFoundError",
    "CommandFailedError",
]
