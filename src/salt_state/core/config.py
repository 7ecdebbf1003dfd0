"""User configuration for the ``state`` wrapper.

The config file is optional YAML::

    binaries:
      local: salt-call
      global: salt
    defaults:
      colour: false
      full_output: false
      quiet: false
      use_master: false

Resolution order for the file location:

1. ``SALT_STATE_CONFIG`` environment variable
2. ``<home>/config.yaml`` where home is ``SALT_STATE_HOME``, ``~/.salt-state``
   on macOS/Linux, or the platformdirs config dir on Windows.

``SALT_STATE_SALT_CALL`` and ``SALT_STATE_SALT`` override the binaries.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .command import Flags
from .constants import SALT, SALT_CALL
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "SALT_STATE_HOME"
CONFIG_ENV_VAR = "SALT_STATE_CONFIG"
SALT_CALL_ENV_VAR = "SALT_STATE_SALT_CALL"
SALT_ENV_VAR = "SALT_STATE_SALT"

_DEFAULT_KEYS = ("colour", "full_output", "quiet", "use_master")

__all__ = [
    "StateConfig",
    "get_state_home",
    "get_config_path",
    "load_config",
]


def _is_windows() -> bool:
    return os.name == "nt"


def get_state_home() -> Path:
    """Return the directory holding the wrapper's config file."""
    if env_home := os.environ.get(HOME_ENV_VAR):
        return Path(env_home)

    if _is_windows():
        from platformdirs import user_config_dir

        return Path(user_config_dir("salt-state"))

    return Path.home() / ".salt-state"


def get_config_path() -> Path:
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path)
    return get_state_home() / "config.yaml"


@dataclass(frozen=True)
class StateConfig:
    """Binary names and flag defaults applied before every run."""

    local_binary: str = SALT_CALL
    global_binary: str = SALT
    colour: bool = False
    full_output: bool = False
    quiet: bool = False
    use_master: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, object] | None) -> StateConfig:
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a mapping")

        binaries = data.get("binaries") or {}
        defaults = data.get("defaults") or {}
        if not isinstance(binaries, dict):
            raise ConfigError("'binaries' must be a mapping")
        if not isinstance(defaults, dict):
            raise ConfigError("'defaults' must be a mapping")

        values: dict[str, object] = {}
        for key, field_name in (("local", "local_binary"), ("global", "global_binary")):
            value = binaries.get(key)
            if value is None:
                continue
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"binaries.{key} must be a non-empty string")
            values[field_name] = value.strip()

        for key in _DEFAULT_KEYS:
            value = defaults.get(key)
            if value is None:
                continue
            if not isinstance(value, bool):
                raise ConfigError(f"defaults.{key} must be true or false")
            values[key] = value

        unknown = sorted(set(defaults) - set(_DEFAULT_KEYS))
        if unknown:
            logger.warning("ignoring unknown defaults in config: %s", ", ".join(map(str, unknown)))

        return cls(**values)

    def with_env_overrides(self) -> StateConfig:
        """Return a copy with binary names taken from the environment."""
        overrides: dict[str, str] = {}
        if local := os.environ.get(SALT_CALL_ENV_VAR, "").strip():
            overrides["local_binary"] = local
        if remote := os.environ.get(SALT_ENV_VAR, "").strip():
            overrides["global_binary"] = remote
        return replace(self, **overrides) if overrides else self

    def apply_defaults(self, flags: Flags) -> Flags:
        """Switch on every flag the config enables by default."""
        return replace(
            flags,
            colour=flags.colour or self.colour,
            full_output=flags.full_output or self.full_output,
            quiet=flags.quiet or self.quiet,
            use_master=flags.use_master or self.use_master,
        )


def load_config(path: Path | None = None) -> StateConfig:
    """Load the config file, falling back to defaults when it is missing."""
    config_path = path or get_config_path()
    if not config_path.exists():
        logger.debug("no config file at %s", config_path)
        return StateConfig().with_env_overrides()

    yaml = YAML(typ="safe")
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle)
    except (OSError, YAMLError) as exc:
        raise ConfigError(f"Failed to parse {config_path}: {exc}") from exc

    logger.debug("loaded config from %s", config_path)
    try:
        config = StateConfig.from_dict(payload)
    except ConfigError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc
    return config.with_env_overrides()
