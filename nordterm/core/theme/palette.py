"""Nord color constants and the ordered GNOME Terminal settings they feed.

Values are GVariant text, ready for `dconf write`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..terminal_profiles.gvariant import format_bool, format_string, format_string_list


NORD0 = "#2E3440"
NORD1 = "#3B4252"
NORD3 = "#4C566A"
NORD4 = "#D8DEE9"
NORD5 = "#E5E9F0"
NORD6 = "#ECEFF4"
NORD7 = "#8FBCBB"
NORD8 = "#88C0D0"
NORD9 = "#81A1C1"
NORD11 = "#BF616A"
NORD13 = "#EBCB8B"
NORD14 = "#A3BE8C"
NORD15 = "#B48EAD"

NORD0_RGB = "rgb(46,52,64)"
NORD1_RGB = "rgb(59,66,82)"
NORD4_RGB = "rgb(216,222,233)"
NORD8_RGB = "rgb(136,192,208)"

# ANSI colors 0-15. Normal and bright variants share base colors except for
# black/white (slots 0, 7, 8, 15) and cyan (slot 14).
PALETTE: tuple[str, ...] = (
    NORD1,
    NORD11,
    NORD14,
    NORD13,
    NORD9,
    NORD15,
    NORD8,
    NORD5,
    NORD3,
    NORD11,
    NORD14,
    NORD13,
    NORD9,
    NORD15,
    NORD7,
    NORD6,
)

BACKGROUND = NORD0
FOREGROUND = NORD4
BOLD = FOREGROUND


@dataclass(frozen=True)
class SettingsGroup:
    description: str
    entries: tuple[tuple[str, str], ...]


THEME_GROUPS: tuple[SettingsGroup, ...] = (
    SettingsGroup(
        "Nord color palette",
        (("palette", format_string_list(PALETTE)),),
    ),
    SettingsGroup(
        "background- and foreground colors",
        (
            ("background-color", format_string(BACKGROUND)),
            ("foreground-color", format_string(FOREGROUND)),
            ("use-transparent-background", format_bool(False)),
        ),
    ),
    SettingsGroup(
        "bold color and configuration",
        (
            ("bold-color", format_string(BOLD)),
            ("bold-color-same-as-fg", format_bool(True)),
        ),
    ),
    SettingsGroup(
        "system theme compatibility configuration",
        (
            ("use-theme-colors", format_bool(False)),
            ("use-theme-background", format_bool(False)),
            ("use-theme-transparency", format_bool(False)),
        ),
    ),
    SettingsGroup(
        "cursor colors and configuration",
        (
            ("cursor-colors-set", format_bool(True)),
            ("cursor-foreground-color", format_string(NORD1_RGB)),
            ("cursor-background-color", format_string(NORD4_RGB)),
        ),
    ),
    SettingsGroup(
        "highlight colors and configuration",
        (
            ("highlight-colors-set", format_bool(True)),
            ("highlight-foreground-color", format_string(NORD0_RGB)),
            ("highlight-background-color", format_string(NORD8_RGB)),
        ),
    ),
)
