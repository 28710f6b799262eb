from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from functools import partial
from typing import Callable, Optional

from ..utils.subproc import CommandError, run_checked
from .dconf import profile_dir, profile_key_path
from .gvariant import format_string
from .lock import profile_list_lock
from .models import CloneError, IdentityError, ListUpdateError, TerminalProfile, WriteError
from .ops_read import resolve_default_identity
from .protocols import ConfigStore, ProfileListService


logger = logging.getLogger(__name__)

IdentityGenerator = Callable[[], str]
Checkpoint = Callable[[], None]


def _uuidgen() -> str:
    return run_checked(["uuidgen"])


def generate_identity(generator: Optional[IdentityGenerator] = None) -> str:
    """Produce a new profile UUID.

    Uniqueness against existing profiles is not checked.
    """

    gen = generator if generator is not None else _uuidgen
    try:
        token = gen()
    except CommandError as exc:
        raise IdentityError(f"Failed to generate a profile UUID: {exc}") from exc

    token = str(token or "").strip()
    if not token:
        raise IdentityError("Profile UUID generator returned an empty value")
    return token


def write_key(store: ConfigStore, uuid: str, key: str, value: str, *, base_path: str) -> None:
    try:
        store.write(profile_key_path(base_path, uuid, key), value)
    except CommandError as exc:
        raise WriteError(f"Failed to write '{key}' to profile '{uuid}': {exc}") from exc


def clone_subtree(store: ConfigStore, source: str, target: str, *, base_path: str) -> None:
    """Copy the whole dconf directory of *source* under *target*.

    A single dump/load, so keys the theme does not overwrite keep the source
    profile's values.
    """

    try:
        blob = store.dump(profile_dir(base_path, source))
        store.load(profile_dir(base_path, target), blob)
    except CommandError as exc:
        raise CloneError(f"Failed to clone profile '{source}' to '{target}': {exc}") from exc


def set_visible_name(store: ConfigStore, uuid: str, name: str, *, base_path: str) -> None:
    write_key(store, uuid, "visible-name", format_string(name), base_path=base_path)


def register_in_list(
    profile_list: ProfileListService,
    uuid: str,
    *,
    checkpoint: Optional[Checkpoint] = None,
    lock: Optional[Callable[[], AbstractContextManager]] = None,
) -> list[str]:
    """Append *uuid* to the profile list and return the written list.

    Existing entries keep their order. An already listed UUID is not added
    twice. *checkpoint* runs while waiting on another run's list lock.
    """

    if lock is None:
        lock = partial(profile_list_lock, checkpoint=checkpoint)

    try:
        with lock():
            current = profile_list.get_list()
            updated = list(current)
            if uuid not in updated:
                updated.append(uuid)
            profile_list.set_list(updated)
    except (CommandError, OSError) as exc:
        raise ListUpdateError(f"Failed to add profile '{uuid}' to the profile list: {exc}") from exc
    return updated


def clone_default_profile(
    store: ConfigStore,
    profile_list: ProfileListService,
    *,
    base_path: str,
    visible_name: str,
    generator: Optional[IdentityGenerator] = None,
    checkpoint: Optional[Checkpoint] = None,
    lock: Optional[Callable[[], AbstractContextManager]] = None,
) -> TerminalProfile:
    """Clone the default profile under a fresh UUID and register it.

    Steps run strictly in order; the UUID is listed only after its subtree
    exists. A failure part-way leaves whatever was already written in place.
    """

    check = checkpoint if checkpoint is not None else (lambda: None)

    source = resolve_default_identity(profile_list)
    check()
    uuid = generate_identity(generator)
    check()
    clone_subtree(store, source, uuid, base_path=base_path)
    check()
    set_visible_name(store, uuid, visible_name, base_path=base_path)
    check()
    register_in_list(profile_list, uuid, checkpoint=check, lock=lock)

    logger.info("Cloned the default profile '%s' with new UUID '%s'", source, uuid)
    return TerminalProfile(uuid=uuid, name=visible_name)
