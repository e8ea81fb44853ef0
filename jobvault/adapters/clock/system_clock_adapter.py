from __future__ import annotations

from datetime import UTC, date, datetime, tzinfo

from jobvault.ports.clock_port import ClockPort


class SystemClockAdapter(ClockPort):
    def __init__(self, tz: tzinfo = UTC) -> None:
        self._tz = tz

    def today(self) -> date:
        return datetime.now(self._tz).date()
