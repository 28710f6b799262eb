from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from .utils.subproc import RunResult, run


logger = logging.getLogger(__name__)

_VERSION_LIKE_RE = re.compile(r"\d+(?:\.\d+){1,3}")


@dataclass(frozen=True)
class TerminalVersion:
    text: str
    parts: tuple[int, ...]


def normalize_version_text(text: str | None) -> str | None:
    """Extract the first dotted version from free text.

    Examples:
    - '3.36.2' -> '3.36.2'
    - 'GNOME Terminal 3.44.0 using VTE 0.68.0 +BIDI' -> '3.44.0'
    """

    if not text:
        return None

    m = _VERSION_LIKE_RE.search(str(text).strip())
    if not m:
        return None
    return m.group(0)


def parse_version(text: str | None) -> TerminalVersion | None:
    v = normalize_version_text(text)
    if not v:
        return None
    return TerminalVersion(text=v, parts=tuple(int(p) for p in v.split(".")))


def compare_versions(a: str | None, b: str | None) -> int | None:
    """Compare versions.

    Returns:
    - -1 if a < b
    - 0 if a == b
    - 1 if a > b
    - None if either side can't be parsed
    """

    pa = parse_version(a)
    pb = parse_version(b)
    if pa is None or pb is None:
        return None

    max_len = max(len(pa.parts), len(pb.parts), 3)
    a_parts = pa.parts + (0,) * (max_len - len(pa.parts))
    b_parts = pb.parts + (0,) * (max_len - len(pb.parts))

    if a_parts < b_parts:
        return -1
    if a_parts > b_parts:
        return 1
    return 0


def detect_terminal_version(
    *,
    runner: Callable[[list[str]], RunResult] = run,
) -> Optional[TerminalVersion]:
    """Return the installed GNOME Terminal version, or None if unknown."""

    result = runner(["gnome-terminal", "--version"])
    if not result.ok:
        logger.debug("Could not query GNOME Terminal version: %s", result.stderr.strip() or result.exit_code)
        return None
    return parse_version(result.stdout)


def is_supported_terminal_version(version: TerminalVersion | None, minimum: str) -> bool | None:
    """True/False against *minimum*; None when the version is unknown."""

    if version is None:
        return None
    cmp = compare_versions(version.text, minimum)
    if cmp is None:
        return None
    return cmp >= 0
