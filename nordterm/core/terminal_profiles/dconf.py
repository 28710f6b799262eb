from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..utils.subproc import run_checked


logger = logging.getLogger(__name__)

Runner = Callable[..., str]


def profile_dir(base_path: str, uuid: str) -> str:
    """`<base>/:<uuid>/`, the dconf directory holding one profile."""

    return f"{base_path.rstrip('/')}/:{uuid}/"


def profile_key_path(base_path: str, uuid: str, key: str) -> str:
    return profile_dir(base_path, uuid) + key


class DconfStore:
    """Read/write dconf keys and directories through the `dconf` executable.

    Every method blocks until `dconf` exits and raises `CommandError` when it
    cannot be run or reports a failure.
    """

    def __init__(self, runner: Runner = run_checked) -> None:
        self._run = runner

    def _dconf(self, *args: str, input_text: Optional[str] = None) -> str:
        cmd: Sequence[str] = ["dconf", *args]
        logger.debug("dconf %s", " ".join(args))
        if input_text is None:
            return self._run(cmd)
        return self._run(cmd, input_text=input_text)

    def read(self, path: str) -> Optional[str]:
        """Return the GVariant text stored at *path*, or None if unset."""

        out = self._dconf("read", path).strip()
        return out or None

    def write(self, path: str, value: str) -> None:
        self._dconf("write", path, value)

    def dump(self, path: str) -> str:
        return self._dconf("dump", path)

    def load(self, path: str, blob: str) -> None:
        self._dconf("load", path, input_text=blob)
