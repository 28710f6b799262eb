"""nordterm startup entrypoint.

This module owns the process: arguments, the console logging scope, abort
signal handling and the exit status. The provisioning itself lives in
`lifecycle`.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional

from ..core.config import Settings
from ..core.logging_utils import abort_notice, console_logging, success
from ..core.terminal_profiles import DependencyMissing, ProfileError, UserAborted
from .args import parse_args
from .lifecycle import Backend, ProvisioningController
from .signals import AbortToken, handle_abort_signals


logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _provision(settings: Settings, backend: Backend, token: AbortToken) -> int:
    controller = ProvisioningController(settings, backend, token=token)
    try:
        profile = controller.run()
    except (UserAborted, KeyboardInterrupt):
        abort_notice(logger)
        return EXIT_FAILURE
    except DependencyMissing as exc:
        logger.error("Required dependencies were not fulfilled: %s", " ".join(exc.missing))
        return EXIT_FAILURE
    except ProfileError as exc:
        # A signal also reaches the running dconf/gsettings child, which then
        # fails; report that as the abort it is.
        if token.requested:
            abort_notice(logger)
            return EXIT_FAILURE
        logger.error("%s", exc)
        if controller.created and controller.profile is not None:
            logger.warning("The profile '%s' was created but is not fully themed", controller.profile.uuid)
        return EXIT_FAILURE
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        return EXIT_FAILURE

    if controller.created:
        success(
            logger,
            "Nord GNOME Terminal version %s has been successfully applied to the newly created '%s' profile",
            settings.theme_version,
            profile.name,
        )
    else:
        success(
            logger,
            "Nord GNOME Terminal version %s has been successfully applied to the '%s' profile",
            settings.theme_version,
            profile.name,
        )
    return EXIT_SUCCESS


def run(argv: Optional[Iterable[str]] = None, *, backend: Optional[Backend] = None) -> int:
    """Parse *argv*, provision one profile and return the exit status."""

    settings = Settings.from_args(parse_args(argv))
    token = AbortToken()

    with console_logging(settings.log_level), handle_abort_signals(token):
        try:
            return _provision(settings, backend or Backend.system(settings), token)
        finally:
            logger.debug("Cleaning up")


def main(argv: Optional[Iterable[str]] = None) -> None:
    sys.exit(run(argv))
