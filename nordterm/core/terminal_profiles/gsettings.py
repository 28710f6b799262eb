from __future__ import annotations

import logging
from typing import Callable, Sequence

from ..utils.subproc import CommandError, run_checked
from .gvariant import format_string_list, parse_string, parse_string_list


logger = logging.getLogger(__name__)

PROFILE_LIST_SCHEMA = "org.gnome.Terminal.ProfilesList"


class GSettingsProfileList:
    """The GNOME Terminal profile list, accessed through `gsettings`."""

    def __init__(self, schema: str = PROFILE_LIST_SCHEMA, runner: Callable[..., str] = run_checked) -> None:
        self.schema = schema
        self._run = runner

    def _get(self, key: str) -> str:
        return self._run(["gsettings", "get", self.schema, key]).strip()

    def get_list(self) -> list[str]:
        raw = self._get("list")
        values = parse_string_list(raw)
        if values is None:
            raise CommandError(f"Unexpected value for {self.schema} list: {raw!r}")
        return values

    def get_default(self) -> str:
        raw = self._get("default")
        value = parse_string(raw)
        if value is None:
            raise CommandError(f"Unexpected value for {self.schema} default: {raw!r}")
        return value

    def set_list(self, uuids: Sequence[str]) -> None:
        value = format_string_list(uuids)
        logger.debug("gsettings set %s list %s", self.schema, value)
        self._run(["gsettings", "set", self.schema, "list", value])
