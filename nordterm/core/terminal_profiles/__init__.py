"""GNOME Terminal profile access through dconf and gsettings."""

from __future__ import annotations

from .dconf import DconfStore, profile_dir, profile_key_path
from .gsettings import GSettingsProfileList
from .models import (
    CloneError,
    DependencyMissing,
    IdentityError,
    ListUpdateError,
    ProfileError,
    ProfileLookupError,
    ProfileNotFound,
    TerminalProfile,
    UnsupportedTerminalVersion,
    UserAborted,
    WriteError,
)
from .ops_read import find_profile_by_name, list_profiles, read_version_marker, resolve_default_identity
from .ops_write import (
    clone_default_profile,
    clone_subtree,
    generate_identity,
    register_in_list,
    set_visible_name,
    write_key,
)
from .protocols import ConfigStore, ProfileListService


__all__ = [
    "CloneError",
    "ConfigStore",
    "DconfStore",
    "DependencyMissing",
    "GSettingsProfileList",
    "IdentityError",
    "ListUpdateError",
    "ProfileError",
    "ProfileListService",
    "ProfileLookupError",
    "ProfileNotFound",
    "TerminalProfile",
    "UnsupportedTerminalVersion",
    "UserAborted",
    "WriteError",
    "clone_default_profile",
    "clone_subtree",
    "find_profile_by_name",
    "generate_identity",
    "list_profiles",
    "profile_dir",
    "profile_key_path",
    "read_version_marker",
    "register_in_list",
    "resolve_default_identity",
    "set_visible_name",
    "write_key",
]
