"""Core planning and execution for the salt wrapper."""

from .command import Action, CommandPlan, Flags, Invocation, build_plan, build_prefix
from .config import StateConfig, load_config
from .exceptions import (
    CommandFailedError,
    ConfigError,
    ExecutableNotFoundError,
    StateError,
    UsageError,
)
from .runner import resolve_executable, run_invocation, run_plan

__all__ = [
    "Action",
    "CommandPlan",
    "Flags",
    "Invocation",
    "build_plan",
    "build_prefix",
    "StateConfig",
    "load_config",
    "CommandFailedError",
    "ConfigError",
    "ExecutableNotFoundError",
    "StateError",
    "UsageError",
    "resolve_executable",
    "run_invocation",
    "run_plan",
]
