from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from typing import Callable, Iterable, Optional


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DependencyCheck:
    required: tuple[str, ...]
    missing: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.missing


def validate_dependencies(
    required: Iterable[str],
    *,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> DependencyCheck:
    """Check that every executable in *required* resolves on PATH.

    Inspection only; nothing is executed. Missing names keep their input order.
    """

    names = tuple(dict.fromkeys(str(n) for n in required))
    missing = tuple(name for name in names if not which(name))
    result = DependencyCheck(required=names, missing=missing)

    if result.ok:
        logger.info("Validated required dependencies: %s", " ".join(names))
    else:
        logger.warning("Missing required dependencies: %s", " ".join(missing))
    return result
