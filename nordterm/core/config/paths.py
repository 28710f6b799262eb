"""Config path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def config_dir() -> Path:
    """Return the directory used for nordterm state.

    Priority:
    - NORDTERM_CONFIG_DIR
    - XDG_CONFIG_HOME/nordterm
    - ~/.config/nordterm
    """

    p = os.environ.get("NORDTERM_CONFIG_DIR")
    if p:
        return Path(p)

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "nordterm"

    return Path.home() / ".config" / "nordterm"


def profile_list_lock_path() -> Path:
    return config_dir() / "profile-list.lock"
