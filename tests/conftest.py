from __future__ import annotations

from pathlib import Path

import pytest

from salt_state.core.config import (
    CONFIG_ENV_VAR,
    HOME_ENV_VAR,
    SALT_CALL_ENV_VAR,
    SALT_ENV_VAR,
)


@pytest.fixture(autouse=True)
def isolated_state_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the wrapper at an empty home so user config never leaks in."""
    home = tmp_path / "state-home"
    home.mkdir()
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    for name in (CONFIG_ENV_VAR, SALT_CALL_ENV_VAR, SALT_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture()
def write_config(isolated_state_home: Path):
    """Write ``config.yaml`` into the isolated home and return its path."""

    def _write(text: str) -> Path:
        path = isolated_state_home / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
