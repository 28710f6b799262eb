from __future__ import annotations

import argparse
import sys
from typing import Iterable, NoReturn

from .. import __version__
from ..core.config.defaults import DEFAULTS, MAX_LOG_LEVEL, MIN_LOG_LEVEL


EXIT_USAGE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Print the full help on parse errors and exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(EXIT_USAGE, f"\n{self.prog}: error: {message}\n")


def _log_level(raw: str) -> int:
    try:
        level = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid log level: {raw!r}")
    if not MIN_LOG_LEVEL <= level <= MAX_LOG_LEVEL:
        raise argparse.ArgumentTypeError(f"log level must be between {MIN_LOG_LEVEL} and {MAX_LOG_LEVEL}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="nordterm",
        description=(
            "Create a Nord themed GNOME Terminal profile by cloning the default profile, "
            "or apply the theme to an existing profile."
        ),
        epilog="Log levels: 0 ERROR, 1 WARNING, 2 SUCCESS, 3 INFO, 4 DEBUG",
    )
    parser.add_argument(
        "-l",
        "--loglevel",
        type=_log_level,
        metavar="LEVEL",
        default=DEFAULTS["log_level"],
        help=f"Console verbosity from {MIN_LOG_LEVEL} to {MAX_LOG_LEVEL} (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        "--profile",
        metavar="NAME",
        help="Apply the theme to the existing profile with this visible name instead of creating a new one",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(list(argv) if argv is not None else None)
