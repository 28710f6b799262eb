"""nordterm configuration.

Settings are built once at startup and passed down explicitly; nothing here
is mutated at runtime.
"""

from __future__ import annotations

from .defaults import DEFAULTS
from .paths import config_dir, profile_list_lock_path
from .settings import Settings


__all__ = [
    "DEFAULTS",
    "Settings",
    "config_dir",
    "profile_list_lock_path",
]
