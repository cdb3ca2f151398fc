from datetime import datetime

from shipnote.core.ports.clock import Clock


class FakeClock(Clock):
    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
