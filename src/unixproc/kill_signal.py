"""Termination signals understood by ``kill`` and their numeric codes."""

from __future__ import annotations

import signal as _signal
from enum import Enum

_DASH = "-"


class KillSignal(Enum):
    """Signals commonly used to stop a process, keyed by their Unix number."""

    SIGHUP = 1
    SIGINT = 2
    SIGQUIT = 3
    SIGKILL = 9
    SIGTERM = 15

    def number(self) -> str:
        """Return the signal number as a string, e.g. ``"15"``."""
        return str(self.value)

    def with_leading_dash(self) -> str:
        """Return the signal number as a ``kill`` flag, e.g. ``"-3"``."""
        return with_leading_dash(self.number())

    def to_signal(self) -> _signal.Signals:
        return _signal.Signals(self.value)


def with_leading_dash(signal: KillSignal | str | int) -> str:
    """Prepend a dash to a signal token unless one is already present.

    ``"9"`` becomes ``"-9"`` while ``"-15"`` is returned unchanged. Applying the
    function twice gives the same result as applying it once.
    """
    if isinstance(signal, KillSignal):
        token = signal.number()
    else:
        token = str(signal)
    if token.startswith(_DASH):
        return token
    return _DASH + token


__all__ = ["KillSignal", "with_leading_dash"]
