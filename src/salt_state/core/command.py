"""Build salt argument vectors from wrapper flags and an action keyword.

Nothing in this module touches the process environment: ``build_plan``
turns a :class:`Flags` value, an action keyword and the trailing arguments
into a :class:`CommandPlan`, or raises :class:`UsageError` when the command
line is incomplete. Running the plan is :mod:`salt_state.core.runner`'s job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from .constants import (
    CHANGES_ONLY,
    CLEAR_CACHE,
    FULL_OUTPUT,
    LOCAL,
    LOG_QUIET,
    NO_COLOUR,
    OUT_FILE,
    REFRESH_PILLAR,
    SALT,
    SALT_CALL,
    STATE_HIGHSTATE,
    STATE_SLS,
    SYNC_ALL,
)
from .exceptions import UsageError

logger = logging.getLogger(__name__)

__all__ = [
    "Action",
    "Flags",
    "Invocation",
    "CommandPlan",
    "build_prefix",
    "resolve_action",
    "build_plan",
]


class Action(str, Enum):
    """Actions understood by the wrapper."""

    SLS = "sls"
    HIGHSTATE = "highstate"
    SYNC = "sync"
    CLEAR = "clear"

    @classmethod
    def from_keyword(cls, keyword: str) -> Action | None:
        """Map a command-line keyword to an action, or None if unknown."""
        if keyword == "up":
            return cls.HIGHSTATE
        try:
            return cls(keyword)
        except ValueError:
            return None


@dataclass(frozen=True)
class Flags:
    """Wrapper flags parsed from the command line."""

    colour: bool = False
    debug: bool = False
    full_output: bool = False
    global_mode: bool = False
    use_master: bool = False
    quiet: bool = False
    out_file: str | None = None

    @property
    def master(self) -> bool:
        """Global commands always go through the master."""
        return self.use_master or self.global_mode


@dataclass(frozen=True)
class Invocation:
    """A single salt command line.

    ``label`` names the step in failure messages; it is empty for actions
    that run only one command.
    """

    argv: tuple[str, ...]
    label: str = ""

    @property
    def executable(self) -> str:
        return self.argv[0]


@dataclass(frozen=True)
class CommandPlan:
    """Invocations to run, in order."""

    action: Action
    invocations: tuple[Invocation, ...]

    def __iter__(self) -> Iterator[Invocation]:
        return iter(self.invocations)

    def __len__(self) -> int:
        return len(self.invocations)


def build_prefix(
    flags: Flags,
    target: str | None = None,
    *,
    local_binary: str = SALT_CALL,
    global_binary: str = SALT,
) -> list[str]:
    """Return the flag-derived part of the argument vector.

    In global mode ``target`` is required and is placed right after the
    executable name.
    """
    if flags.global_mode:
        if target is None:
            raise ValueError("global mode requires a target spec")
        arglist = [global_binary, target]
    else:
        arglist = [local_binary]

    if not flags.master:
        arglist.append(LOCAL)

    if not flags.colour:
        arglist.append(NO_COLOUR)

    if flags.full_output:
        arglist.extend(FULL_OUTPUT)
    else:
        arglist.extend(CHANGES_ONLY)

    if flags.quiet:
        arglist.extend(LOG_QUIET)

    if flags.out_file:
        arglist.extend((OUT_FILE, flags.out_file))

    return arglist


def resolve_action(flags: Flags, action: str | None, args: Sequence[str] = ()) -> Action:
    """Check the action keyword and, in global mode, that a target follows it.

    Needs nothing but the command line, so usage can be shown before any
    configuration is read.
    """
    if not action:
        raise UsageError("no action given", exit_code=0, to_stderr=False)

    if flags.global_mode and not args:
        raise UsageError("global mode requires a target spec")

    resolved = Action.from_keyword(action)
    if resolved is None:
        raise UsageError(f"unknown action {action!r}", exit_code=0, to_stderr=False)
    return resolved


def build_plan(
    flags: Flags,
    action: str | None,
    args: Sequence[str] = (),
    *,
    local_binary: str = SALT_CALL,
    global_binary: str = SALT,
) -> CommandPlan:
    """Turn the parsed command line into the salt invocations to run."""
    resolved = resolve_action(flags, action, args)

    argv = list(args)
    target = None
    if flags.global_mode:
        target = argv.pop(0)

    prefix = build_prefix(
        flags,
        target,
        local_binary=local_binary,
        global_binary=global_binary,
    )

    if resolved is Action.SLS:
        if not argv:
            raise UsageError("sls requires a state to apply")
        invocations = (Invocation(tuple(prefix + [STATE_SLS] + argv)),)
    elif resolved is Action.HIGHSTATE:
        invocations = (Invocation(tuple(prefix + [STATE_HIGHSTATE] + argv)),)
    elif resolved is Action.SYNC:
        invocations = (
            Invocation(tuple(prefix + [REFRESH_PILLAR] + argv), label="refresh pillar"),
            Invocation(tuple(prefix + [SYNC_ALL] + argv), label="sync salt"),
        )
    else:
        invocations = (Invocation(tuple(prefix + [CLEAR_CACHE])),)

    plan = CommandPlan(action=resolved, invocations=invocations)
    logger.debug("planned %d invocation(s) for %s", len(plan), resolved.value)
    return plan
