from __future__ import annotations

from .apply import apply_theme, theme_entries, theme_groups
from .palette import PALETTE, THEME_GROUPS, SettingsGroup


__all__ = [
    "PALETTE",
    "THEME_GROUPS",
    "SettingsGroup",
    "apply_theme",
    "theme_entries",
    "theme_groups",
]
