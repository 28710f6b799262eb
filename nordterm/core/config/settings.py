from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .defaults import DEFAULTS, MAX_LOG_LEVEL, MIN_LOG_LEVEL


def _clamp_log_level(value: Any) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError):
        return int(DEFAULTS["log_level"])
    return max(MIN_LOG_LEVEL, min(MAX_LOG_LEVEL, level))


@dataclass(frozen=True)
class Settings:
    """Process-wide run configuration, constructed once at startup."""

    log_level: int = DEFAULTS["log_level"]
    profile_name: Optional[str] = DEFAULTS["profile_name"]
    visible_name: str = DEFAULTS["visible_name"]
    theme_version: str = DEFAULTS["theme_version"]
    version_key: str = DEFAULTS["version_key"]
    profile_base_path: str = DEFAULTS["profile_base_path"]
    profile_list_schema: str = DEFAULTS["profile_list_schema"]
    dependencies: tuple[str, ...] = field(default=DEFAULTS["dependencies"])
    min_terminal_version: str = DEFAULTS["min_terminal_version"]

    @property
    def clones_default_profile(self) -> bool:
        return not self.profile_name

    @classmethod
    def from_args(cls, args: Any) -> "Settings":
        """Build settings from parsed CLI arguments.

        Missing attributes fall back to the defaults, so a bare namespace works.
        A blank profile name selects clone mode; any other name is kept verbatim
        since visible names may carry surrounding spaces.
        """

        settings = cls()
        loglevel = getattr(args, "loglevel", None)
        if loglevel is not None:
            settings = replace(settings, log_level=_clamp_log_level(loglevel))

        profile = getattr(args, "profile", None)
        if isinstance(profile, str) and profile.strip():
            settings = replace(settings, profile_name=profile)

        return settings
