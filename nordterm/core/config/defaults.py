"""Default configuration values."""

from __future__ import annotations

DEFAULTS: dict = {
    # Console verbosity threshold: 0=ERROR 1=WARNING 2=SUCCESS 3=INFO 4=DEBUG
    "log_level": 2,
    # None clones the default profile; a name re-themes that existing profile.
    "profile_name": None,
    "visible_name": "Nord",
    "theme_version": "0.1.0",
    "version_key": "nord-gnome-terminal-version",
    "profile_base_path": "/org/gnome/terminal/legacy/profiles:",
    "profile_list_schema": "org.gnome.Terminal.ProfilesList",
    "dependencies": ("dconf", "gsettings", "uuidgen"),
    # First GNOME Terminal release storing profiles under the dconf `profiles:` path.
    "min_terminal_version": "3.8",
}

MIN_LOG_LEVEL = 0
MAX_LOG_LEVEL = 4
