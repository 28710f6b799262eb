from __future__ import annotations

import fcntl
from contextlib import nullcontext

import pytest

from nordterm.core import terminal_profiles as tp
from nordterm.core.utils.subproc import CommandError

from .conftest import BASE_PATH, DEFAULT_UUID, MemoryDconf, MemoryProfileList, uuid_sequence


def test_resolve_default_identity(profile_list: MemoryProfileList) -> None:
    assert tp.resolve_default_identity(profile_list) == DEFAULT_UUID


@pytest.mark.parametrize("default", [None, "", "   "])
def test_resolve_default_identity_without_default_raises_lookup_error(default) -> None:
    with pytest.raises(LookupError):
        tp.resolve_default_identity(MemoryProfileList(default=default))


def test_resolve_default_identity_store_failure_is_lookup_error(profile_list: MemoryProfileList) -> None:
    profile_list.fail_get = True

    with pytest.raises(tp.ProfileLookupError):
        tp.resolve_default_identity(profile_list)


def test_generate_identity_strips_output() -> None:
    assert tp.generate_identity(lambda: "  1234-abcd\n") == "1234-abcd"


def test_generate_identity_rejects_empty_and_failures() -> None:
    with pytest.raises(tp.IdentityError):
        tp.generate_identity(lambda: "")

    def failing():
        raise CommandError("uuidgen missing")

    with pytest.raises(tp.IdentityError):
        tp.generate_identity(failing)


def test_clone_subtree_copies_every_key(store: MemoryDconf) -> None:
    source = store.profile_values(DEFAULT_UUID)
    nested = f"{BASE_PATH}/:{DEFAULT_UUID}/sub/inner-key"
    store.values[nested] = "42"

    tp.clone_subtree(store, DEFAULT_UUID, "target", base_path=BASE_PATH)

    cloned = store.profile_values("target")
    assert {k: v for k, v in cloned.items() if "/" not in k} == source
    assert cloned["sub/inner-key"] == "42"
    # Source is untouched.
    assert store.profile_values(DEFAULT_UUID)["font"] == "'Monospace 12'"


def test_clone_subtree_is_a_single_dump_and_load(store: MemoryDconf) -> None:
    tp.clone_subtree(store, DEFAULT_UUID, "target", base_path=BASE_PATH)

    assert store.calls == [
        ("dump", f"{BASE_PATH}/:{DEFAULT_UUID}/"),
        ("load", f"{BASE_PATH}/:target/"),
    ]


def test_clone_subtree_failure_raises_clone_error(store: MemoryDconf) -> None:
    store.fail_ops.add("load")

    with pytest.raises(tp.CloneError):
        tp.clone_subtree(store, DEFAULT_UUID, "target", base_path=BASE_PATH)


def test_set_visible_name(store: MemoryDconf) -> None:
    tp.set_visible_name(store, "u1", "Nord", base_path=BASE_PATH)

    assert store.profile_values("u1") == {"visible-name": "'Nord'"}


def test_register_in_list_appends_and_preserves_order() -> None:
    plist = MemoryProfileList(uuids=["a", "b"], default="a")

    assert tp.register_in_list(plist, "c1", lock=nullcontext) == ["a", "b", "c1"]
    assert tp.register_in_list(plist, "c2", lock=nullcontext) == ["a", "b", "c1", "c2"]
    assert plist.uuids == ["a", "b", "c1", "c2"]


def test_register_in_list_never_duplicates() -> None:
    plist = MemoryProfileList(uuids=["a", "b"], default="a")

    tp.register_in_list(plist, "b", lock=nullcontext)

    assert plist.uuids == ["a", "b"]


def test_register_in_list_failure_raises_list_update_error() -> None:
    plist = MemoryProfileList(uuids=["a"], default="a")
    plist.fail_set = True

    with pytest.raises(tp.ListUpdateError):
        tp.register_in_list(plist, "c", lock=nullcontext)


def test_register_in_list_holds_the_lock_during_update() -> None:
    events: list[str] = []
    plist = MemoryProfileList(uuids=["a"], default="a")

    class _Lock:
        def __enter__(self):
            events.append("locked")

        def __exit__(self, *exc):
            events.append(f"unlocked:{plist.uuids}")
            return False

    tp.register_in_list(plist, "c", lock=_Lock)

    assert events == ["locked", "unlocked:['a', 'c']"]


def test_clone_default_profile_runs_steps_in_order(store: MemoryDconf, profile_list: MemoryProfileList) -> None:
    profile = tp.clone_default_profile(
        store,
        profile_list,
        base_path=BASE_PATH,
        visible_name="Nord",
        generator=uuid_sequence(["u-new"]),
    )

    assert profile == tp.TerminalProfile(uuid="u-new", name="Nord")
    assert [c[0] for c in store.mutations] == ["load", "write"]
    assert profile_list.uuids == [DEFAULT_UUID, "u-new"]
    cloned = store.profile_values("u-new")
    assert cloned["visible-name"] == "'Nord'"
    assert cloned["font"] == "'Monospace 12'"


def test_clone_default_profile_does_not_register_when_clone_fails(
    store: MemoryDconf, profile_list: MemoryProfileList
) -> None:
    store.fail_ops.add("dump")

    with pytest.raises(tp.CloneError):
        tp.clone_default_profile(
            store,
            profile_list,
            base_path=BASE_PATH,
            visible_name="Nord",
            generator=uuid_sequence(["u-new"]),
        )

    assert profile_list.uuids == [DEFAULT_UUID]
    assert profile_list.set_calls == []


def test_list_and_find_profiles_by_name(store: MemoryDconf) -> None:
    store.values[f"{BASE_PATH}/:other/visible-name"] = "'Work'"
    plist = MemoryProfileList(uuids=[DEFAULT_UUID, "other"])

    profiles = tp.list_profiles(store, plist, base_path=BASE_PATH)

    assert profiles == [
        tp.TerminalProfile(uuid=DEFAULT_UUID, name="Default"),
        tp.TerminalProfile(uuid="other", name="Work"),
    ]
    assert tp.find_profile_by_name(store, plist, "Work", base_path=BASE_PATH).uuid == "other"


def test_find_profile_by_name_missing_raises(store: MemoryDconf, profile_list: MemoryProfileList) -> None:
    with pytest.raises(tp.ProfileNotFound) as excinfo:
        tp.find_profile_by_name(store, profile_list, "Nope", base_path=BASE_PATH)

    assert isinstance(excinfo.value, LookupError)
    assert "'Default'" in str(excinfo.value)


def test_read_version_marker(store: MemoryDconf) -> None:
    key = "nord-gnome-terminal-version"
    assert tp.read_version_marker(store, DEFAULT_UUID, base_path=BASE_PATH, key=key) is None

    store.values[f"{BASE_PATH}/:{DEFAULT_UUID}/{key}"] = "'0.1.0'"

    assert tp.read_version_marker(store, DEFAULT_UUID, base_path=BASE_PATH, key=key) == "0.1.0"


def test_register_in_list_abort_while_waiting_on_lock_leaves_list(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("NORDTERM_CONFIG_DIR", str(tmp_path))
    plist = MemoryProfileList(uuids=["a"])

    def abort() -> None:
        raise tp.UserAborted("Interrupted by SIGTERM")

    with open(tmp_path / "profile-list.lock", "a+") as other:
        fcntl.flock(other.fileno(), fcntl.LOCK_EX)
        with pytest.raises(tp.UserAborted):
            tp.register_in_list(plist, "c", checkpoint=abort)

    assert plist.set_calls == []
    assert plist.uuids == ["a"]
