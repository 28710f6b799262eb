from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import Callable, Iterator, Optional

from ..config import profile_list_lock_path


logger = logging.getLogger(__name__)

POLL_INTERVAL_S = 0.1


@contextmanager
def profile_list_lock(
    lock_path: Optional[Path] = None,
    *,
    checkpoint: Optional[Callable[[], None]] = None,
    poll_interval_s: float = POLL_INTERVAL_S,
) -> Iterator[bool]:
    """Hold an exclusive advisory lock around a profile-list update.

    Serializes concurrent nordterm runs so neither loses its appended entry.
    Other programs writing the list are not covered. Yields True when the
    lock is held; False when it could not be taken (no `fcntl`, unusable lock
    file), in which case the update goes ahead unlocked.

    While another run holds the lock, *checkpoint* is called between
    attempts so an abort request still takes effect.
    """

    try:
        import fcntl  # Linux/Unix
    except ImportError:
        yield False
        return

    path = lock_path if lock_path is not None else profile_list_lock_path()
    with suppress(OSError):
        path.parent.mkdir(parents=True, exist_ok=True)

    try:
        fh = open(path, "a+")
    except OSError as exc:
        logger.warning("Updating the profile list without a lock, cannot open %s: %s", path, exc)
        yield False
        return

    with fh:
        while True:
            try:
                fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except BlockingIOError:
                if checkpoint is not None:
                    checkpoint()
                time.sleep(poll_interval_s)
            except OSError as exc:
                logger.warning("Updating the profile list without a lock, cannot lock %s: %s", path, exc)
                yield False
                return

        try:
            with suppress(OSError):
                fh.seek(0)
                fh.truncate()
                fh.write(f"pid={os.getpid()}\n")
                fh.flush()
            logger.debug("Acquired profile list lock %s", path)
            yield True
        finally:
            fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
