"""Typed boundaries for the external configuration services.

The dconf/gsettings command wrappers implement these; tests substitute
in-memory doubles.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ConfigStore(Protocol):
    def read(self, path: str) -> Optional[str]: ...

    def write(self, path: str, value: str) -> None: ...

    def dump(self, path: str) -> str: ...

    def load(self, path: str, blob: str) -> None: ...


@runtime_checkable
class ProfileListService(Protocol):
    def get_list(self) -> list[str]: ...

    def get_default(self) -> str: ...

    def set_list(self, uuids: Sequence[str]) -> None: ...
