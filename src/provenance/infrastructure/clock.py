"""Time source for hosts.

The registry never reads the clock itself; whatever fronts it (the CLI
here) asks a Clock for ``now`` and passes the value in.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):

    def now_utc(self) -> datetime:
        ...  # pragma: no cover


class SystemClock:

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)
