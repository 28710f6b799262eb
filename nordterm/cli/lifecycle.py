"""Provisioning sequence: validate, clone (or look up), apply.

The controller owns no cleanup of its own; teardown lives in the entrypoint's
scopes so it runs on every exit path.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..core.config import Settings
from ..core.dependencies import validate_dependencies
from ..core.terminal_profiles import (
    ConfigStore,
    DconfStore,
    DependencyMissing,
    GSettingsProfileList,
    ProfileListService,
    TerminalProfile,
    UnsupportedTerminalVersion,
    clone_default_profile,
    find_profile_by_name,
    read_version_marker,
)
from ..core.terminal_profiles.ops_write import IdentityGenerator
from ..core.theme import apply_theme
from ..core.utils.subproc import RunResult, run
from ..core.version_check import detect_terminal_version, is_supported_terminal_version
from .signals import AbortToken


logger = logging.getLogger(__name__)


class Stage(str, Enum):
    START = "start"
    VALIDATING_DEPS = "validating-deps"
    ABORTED = "aborted"
    PROVISIONING = "provisioning"
    APPLYING = "applying"
    DONE = "done"


@dataclass
class Backend:
    """External collaborators of one provisioning run."""

    store: ConfigStore
    profile_list: ProfileListService
    which: Callable[[str], Optional[str]] = shutil.which
    identity_generator: Optional[IdentityGenerator] = None
    command_runner: Callable[[list[str]], RunResult] = run

    @classmethod
    def system(cls, settings: Settings) -> "Backend":
        return cls(
            store=DconfStore(),
            profile_list=GSettingsProfileList(settings.profile_list_schema),
        )


class ProvisioningController:
    def __init__(self, settings: Settings, backend: Backend, *, token: Optional[AbortToken] = None) -> None:
        self.settings = settings
        self.backend = backend
        self.token = token if token is not None else AbortToken()
        self.stage = Stage.START
        self.profile: Optional[TerminalProfile] = None
        self.created = False

    def _enter(self, stage: Stage) -> None:
        self.stage = stage
        logger.debug("Entering stage: %s", stage.value)

    def validate(self) -> None:
        """Gate every mutation on the required executables being present."""

        self._enter(Stage.VALIDATING_DEPS)
        check = validate_dependencies(self.settings.dependencies, which=self.backend.which)
        if not check.ok:
            self._enter(Stage.ABORTED)
            raise DependencyMissing(check.missing)

        version = detect_terminal_version(runner=self.backend.command_runner)
        supported = is_supported_terminal_version(version, self.settings.min_terminal_version)
        if supported is None:
            logger.warning("Could not detect the GNOME Terminal version, assuming a dconf based profile layout")
        elif not supported:
            self._enter(Stage.ABORTED)
            raise UnsupportedTerminalVersion(
                f"GNOME Terminal {version.text} is not supported, "
                f"version {self.settings.min_terminal_version} or higher is required"
            )
        else:
            logger.info("Detected GNOME Terminal version %s", version.text)

    def provision(self) -> TerminalProfile:
        self._enter(Stage.PROVISIONING)
        settings = self.settings
        backend = self.backend

        if settings.clones_default_profile:
            profile = clone_default_profile(
                backend.store,
                backend.profile_list,
                base_path=settings.profile_base_path,
                visible_name=settings.visible_name,
                generator=backend.identity_generator,
                checkpoint=self.token.check,
            )
            self.created = True
        else:
            profile = find_profile_by_name(
                backend.store,
                backend.profile_list,
                settings.profile_name,
                base_path=settings.profile_base_path,
            )
            previous = read_version_marker(
                backend.store,
                profile.uuid,
                base_path=settings.profile_base_path,
                key=settings.version_key,
            )
            if previous:
                logger.debug("Profile '%s' was themed with version %s before", profile.name, previous)
            logger.info("Using existing profile '%s' (%s)", profile.name, profile.uuid)

        self.profile = profile
        return profile

    def apply(self, profile: TerminalProfile) -> None:
        self._enter(Stage.APPLYING)
        apply_theme(self.backend.store, profile.uuid, self.settings, checkpoint=self.token.check)

    def run(self) -> TerminalProfile:
        """Run the whole sequence; any error propagates with nothing rolled back."""

        self.token.check()
        self.validate()
        self.token.check()
        profile = self.provision()
        self.token.check()
        self.apply(profile)
        self._enter(Stage.DONE)
        return profile
