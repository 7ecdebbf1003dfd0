"""Salt command-line fragments used to assemble agent invocations."""

from __future__ import annotations

SALT_CALL = "salt-call"
SALT = "salt"

LOCAL = "--local"
NO_COLOUR = "--no-color"
CHANGES_ONLY = ("--state-output", "changes")
FULL_OUTPUT = ("--state-output", "full")
LOG_QUIET = ("-l", "warning")
OUT_FILE = "--out-file"

STATE_SLS = "state.sls"
STATE_HIGHSTATE = "state.highstate"
REFRESH_PILLAR = "saltutil.refresh_pillar"
SYNC_ALL = "saltutil.sync_all"
CLEAR_CACHE = "saltutil.clear_cache"

__all__ = [
    "SALT_CALL",
    "SALT",
    "LOCAL",
    "NO_COLOUR",
    "CHANGES_ONLY",
    "FULL_OUTPUT",
    "LOG_QUIET",
    "OUT_FILE",
    "STATE_SLS",
    "STATE_HIGHSTATE",
    "REFRESH_PILLAR",
    "SYNC_ALL",
    "CLEAR_CACHE",
]
