from __future__ import annotations

import os
import tempfile
from typing import Iterable, Optional, Sequence

import pytest

from nordterm.cli.lifecycle import Backend
from nordterm.core.utils.subproc import CommandError, RunResult


# Safety default: during pytest, keep lock files out of the user's real config dir.
os.environ.setdefault("NORDTERM_CONFIG_DIR", tempfile.mkdtemp(prefix="nordterm-test-config-"))


DEFAULT_UUID = "abc-default"
BASE_PATH = "/org/gnome/terminal/legacy/profiles:"


class MemoryDconf:
    """In-memory stand-in for the dconf database.

    `dump`/`load` use the same keyfile layout as `dconf dump`: a `[/]`
    section for keys directly under the directory and relative sections below it.
    """

    def __init__(self, values: Optional[dict[str, str]] = None) -> None:
        self.values: dict[str, str] = dict(values or {})
        self.calls: list[tuple[str, str]] = []
        self.fail_ops: set[str] = set()
        self.fail_keys: set[str] = set()

    def _maybe_fail(self, op: str, path: str) -> None:
        if op in self.fail_ops or path.rsplit("/", 1)[-1] in self.fail_keys:
            raise CommandError(f"dconf {op} {path} failed")

    @property
    def mutations(self) -> list[tuple[str, str]]:
        return [c for c in self.calls if c[0] in ("write", "load")]

    def read(self, path: str) -> Optional[str]:
        self.calls.append(("read", path))
        self._maybe_fail("read", path)
        return self.values.get(path)

    def write(self, path: str, value: str) -> None:
        self.calls.append(("write", path))
        self._maybe_fail("write", path)
        self.values[path] = value

    def dump(self, path: str) -> str:
        self.calls.append(("dump", path))
        self._maybe_fail("dump", path)
        sections: dict[str, list[str]] = {}
        for key_path in sorted(self.values):
            if not key_path.startswith(path):
                continue
            rel = key_path[len(path):]
            section, _, key = rel.rpartition("/")
            sections.setdefault(section or "/", []).append(f"{key}={self.values[key_path]}")
        blocks = [f"[{name}]\n" + "\n".join(lines) for name, lines in sections.items()]
        return "\n\n".join(blocks) + ("\n" if blocks else "")

    def load(self, path: str, blob: str) -> None:
        self.calls.append(("load", path))
        self._maybe_fail("load", path)
        section = "/"
        for line in blob.splitlines():
            line = line.strip()
            if not line:
                continue
            if line.startswith("[") and line.endswith("]"):
                section = line[1:-1]
                continue
            key, _, value = line.partition("=")
            prefix = path if section == "/" else f"{path}{section}/"
            self.values[prefix + key] = value

    def profile_values(self, uuid: str, base_path: str = BASE_PATH) -> dict[str, str]:
        prefix = f"{base_path}/:{uuid}/"
        return {k[len(prefix):]: v for k, v in self.values.items() if k.startswith(prefix)}


class MemoryProfileList:
    def __init__(self, uuids: Sequence[str] = (DEFAULT_UUID,), default: Optional[str] = DEFAULT_UUID) -> None:
        self.uuids = list(uuids)
        self.default = default
        self.set_calls: list[list[str]] = []
        self.fail_get = False
        self.fail_set = False

    def get_list(self) -> list[str]:
        if self.fail_get:
            raise CommandError("gsettings get failed")
        return list(self.uuids)

    def get_default(self) -> str:
        if self.fail_get:
            raise CommandError("gsettings get failed")
        return self.default or ""

    def set_list(self, uuids: Sequence[str]) -> None:
        if self.fail_set:
            raise CommandError("gsettings set failed")
        self.set_calls.append(list(uuids))
        self.uuids = list(uuids)


def uuid_sequence(tokens: Iterable[str]):
    it = iter(tokens)
    return lambda: next(it)


def terminal_version_runner(stdout: str = "GNOME Terminal 3.44.0 using VTE 0.68.0 +BIDI +GNUTLS", exit_code: int = 0):
    def _run(args):
        return RunResult(command_str=" ".join(args), stdout=stdout, stderr="", exit_code=exit_code)

    return _run


def seed_default_profile(store: MemoryDconf, uuid: str = DEFAULT_UUID) -> None:
    prefix = f"{BASE_PATH}/:{uuid}/"
    store.values.update(
        {
            prefix + "visible-name": "'Default'",
            prefix + "font": "'Monospace 12'",
            prefix + "use-system-font": "false",
            prefix + "audible-bell": "false",
            prefix + "scrollback-lines": "10000",
        }
    )


@pytest.fixture
def store() -> MemoryDconf:
    s = MemoryDconf()
    seed_default_profile(s)
    return s


@pytest.fixture
def profile_list() -> MemoryProfileList:
    return MemoryProfileList()


@pytest.fixture
def backend(store: MemoryDconf, profile_list: MemoryProfileList) -> Backend:
    return Backend(
        store=store,
        profile_list=profile_list,
        which=lambda name: f"/usr/bin/{name}",
        identity_generator=uuid_sequence(["new-uuid-1", "new-uuid-2", "new-uuid-3"]),
        command_runner=terminal_version_runner(),
    )
