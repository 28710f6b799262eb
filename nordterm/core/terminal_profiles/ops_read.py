from __future__ import annotations

import logging
from typing import Optional

from ..utils.subproc import CommandError
from .dconf import profile_key_path
from .gvariant import parse_string
from .models import ProfileLookupError, ProfileNotFound, TerminalProfile
from .protocols import ConfigStore, ProfileListService


logger = logging.getLogger(__name__)


def resolve_default_identity(profile_list: ProfileListService) -> str:
    """Return the UUID of the current default profile."""

    try:
        uuid = profile_list.get_default()
    except CommandError as exc:
        raise ProfileLookupError(f"Failed to read the default profile: {exc}") from exc

    uuid = str(uuid or "").strip()
    if not uuid:
        raise ProfileLookupError("No default profile is set")
    return uuid


def read_profile_name(store: ConfigStore, uuid: str, *, base_path: str) -> str:
    try:
        raw = store.read(profile_key_path(base_path, uuid, "visible-name"))
    except CommandError as exc:
        raise ProfileLookupError(f"Failed to read the name of profile '{uuid}': {exc}") from exc
    return parse_string(raw) or ""


def list_profiles(store: ConfigStore, profile_list: ProfileListService, *, base_path: str) -> list[TerminalProfile]:
    """Registered profiles in list order, with their visible names."""

    try:
        uuids = profile_list.get_list()
    except CommandError as exc:
        raise ProfileLookupError(f"Failed to read the profile list: {exc}") from exc

    return [TerminalProfile(uuid=u, name=read_profile_name(store, u, base_path=base_path)) for u in uuids]


def find_profile_by_name(
    store: ConfigStore,
    profile_list: ProfileListService,
    name: str,
    *,
    base_path: str,
) -> TerminalProfile:
    """Return the first registered profile whose visible name is *name*."""

    profiles = list_profiles(store, profile_list, base_path=base_path)
    for profile in profiles:
        if profile.name == name:
            return profile

    known = ", ".join(repr(p.name) for p in profiles if p.name) or "none"
    raise ProfileNotFound(f"No profile named '{name}' (available: {known})")


def read_version_marker(store: ConfigStore, uuid: str, *, base_path: str, key: str) -> Optional[str]:
    try:
        raw = store.read(profile_key_path(base_path, uuid, key))
    except CommandError as exc:
        logger.debug("Failed to read version marker of profile '%s': %s", uuid, exc)
        return None
    return parse_string(raw)
