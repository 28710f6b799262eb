from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from ..config import Settings
from ..terminal_profiles.gvariant import format_string
from ..terminal_profiles.ops_write import write_key
from ..terminal_profiles.protocols import ConfigStore
from .palette import THEME_GROUPS, SettingsGroup


logger = logging.getLogger(__name__)


def theme_groups(settings: Settings) -> Iterator[SettingsGroup]:
    """All groups in write order, ending with the version marker."""

    yield from THEME_GROUPS
    yield SettingsGroup(
        "version marker",
        ((settings.version_key, format_string(settings.theme_version)),),
    )


def theme_entries(settings: Settings) -> list[tuple[str, str]]:
    return [entry for group in theme_groups(settings) for entry in group.entries]


def apply_theme(
    store: ConfigStore,
    uuid: str,
    settings: Settings,
    *,
    checkpoint: Optional[Callable[[], None]] = None,
) -> None:
    """Write the Nord settings into profile *uuid*.

    Groups are never skipped or reordered. The first failed write raises
    `WriteError`; earlier writes stay in place.
    """

    for group in theme_groups(settings):
        for key, value in group.entries:
            if checkpoint is not None:
                checkpoint()
            write_key(store, uuid, key, value, base_path=settings.profile_base_path)
        logger.debug("Applied %s", group.description)

    logger.info("Applied theme colors and configurations")
