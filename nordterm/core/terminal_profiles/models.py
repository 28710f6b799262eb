from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TerminalProfile:
    uuid: str
    name: str = ""


class ProfileError(RuntimeError):
    pass


class DependencyMissing(ProfileError):
    def __init__(self, missing: tuple[str, ...] | list[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Missing required dependencies: {' '.join(self.missing)}")


class UnsupportedTerminalVersion(ProfileError):
    pass


class ProfileLookupError(ProfileError, LookupError):
    pass


class ProfileNotFound(ProfileLookupError):
    pass


class IdentityError(ProfileError):
    pass


class CloneError(ProfileError):
    pass


class WriteError(ProfileError):
    pass


class ListUpdateError(ProfileError):
    pass


class UserAborted(ProfileError):
    pass
