from __future__ import annotations

import signal
from contextlib import contextmanager
from typing import Iterator, Optional

from ..core.terminal_profiles.models import UserAborted


ABORT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class AbortToken:
    """Records an abort request; checked between blocking steps."""

    def __init__(self) -> None:
        self._signum: Optional[int] = None

    @property
    def requested(self) -> bool:
        return self._signum is not None

    def request(self, signum: int = signal.SIGINT, _frame=None) -> None:
        self._signum = signum

    def check(self) -> None:
        if self._signum is None:
            return
        try:
            name = signal.Signals(self._signum).name
        except ValueError:
            name = str(self._signum)
        raise UserAborted(f"Interrupted by {name}")


@contextmanager
def handle_abort_signals(token: AbortToken, signals=ABORT_SIGNALS) -> Iterator[AbortToken]:
    """Route *signals* to *token* and restore the previous handlers on exit."""

    previous = {}
    try:
        for sig in signals:
            previous[sig] = signal.signal(sig, token.request)
        yield token
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
