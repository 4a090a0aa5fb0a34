"""
Countdown to the end of a promotion.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from storefront.ui.timers import Ticker

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR


@dataclass(frozen=True)
class TimeLeft:
    days: int
    hours: int
    minutes: int
    seconds: int

    def format(self) -> str:
        """``HH:MM:SS``, prefixed with ``Nd`` when at least a day is left."""
        clock = f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"
        if self.days > 0:
            return f"{self.days}d {clock}"
        return clock


def parse_end_time(value: Union[datetime, str, None]) -> Optional[datetime]:
    """Accept a datetime or an ISO-8601 string; naive values are UTC."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            logger.warning(f"Invalid promotion end date: {value!r}")
            return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def time_left(end: datetime, now: datetime) -> Optional[TimeLeft]:
    """Whole days/hours/minutes/seconds until ``end``; None once it has passed."""
    remaining = int((end - now).total_seconds() * 1000)
    if remaining <= 0:
        return None
    return TimeLeft(
        days=remaining // MS_PER_DAY,
        hours=(remaining % MS_PER_DAY) // MS_PER_HOUR,
        minutes=(remaining % MS_PER_HOUR) // MS_PER_MINUTE,
        seconds=(remaining % MS_PER_MINUTE) // MS_PER_SECOND,
    )


class Countdown:
    """
    Countdown state for one promotion.

    Until the first ``tick`` the current time is unknown and ``render`` gives
    a neutral ``00:00:00``. Once the end has passed ``render`` gives None and
    the caller hides the whole countdown.
    """

    PLACEHOLDER = "00:00:00"

    def __init__(self, end: Union[datetime, str, None]):
        self.end = parse_end_time(end)
        self.remaining: Optional[TimeLeft] = None
        self.initialized = False
        self._ticker: Optional[Ticker] = None

    @property
    def expired(self) -> bool:
        return self.initialized and self.remaining is None

    def tick(self, now: Optional[datetime] = None) -> Optional[TimeLeft]:
        now = now or datetime.now(timezone.utc)
        self.initialized = True
        self.remaining = time_left(self.end, now) if self.end else None
        return self.remaining

    def render(self) -> Optional[str]:
        if not self.initialized:
            return self.PLACEHOLDER
        if self.remaining is None:
            return None
        return self.remaining.format()

    def start(self) -> None:
        """Compute now and refresh every second on the running loop."""
        self.tick()
        if self._ticker is None:
            self._ticker = Ticker(1.0, self.tick, name="countdown")
        self._ticker.start()

    async def stop(self) -> None:
        if self._ticker is not None:
            await self._ticker.stop()
