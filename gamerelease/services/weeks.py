from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from gamerelease.core.errors import DomainError

WEEK = timedelta(days=7)
ONE_MS = timedelta(milliseconds=1)
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class WeekSelector(int, Enum):
    PREVIOUS = -1
    THIS = 0
    NEXT = 1


# intent name -> week offset
INTENT_WEEKS = {
    "ReleasePreviousWeek": WeekSelector.PREVIOUS,
    "ReleaseThisWeek": WeekSelector.THIS,
    "ReleaseNextWeek": WeekSelector.NEXT,
}


@dataclass(frozen=True)
class WeekRange:
    start: int  # epoch ms, Monday 00:00:00.000
    end: int    # epoch ms, Sunday 23:59:59.999 (inclusive)


def _to_ms(dt: datetime) -> int:
    return (dt - EPOCH) // ONE_MS


def week_range(selector: WeekSelector | str, now: Optional[datetime] = None, tz: str = "UTC") -> WeekRange:
    """
    Inclusive range of the ISO week `selector` weeks away from the week of `now`.

    `selector` may also be one of the release intent names. `now` defaults to
    the wall clock in `tz`; a naive `now` is read as local time in `tz`.
    """
    if isinstance(selector, str):
        if selector not in INTENT_WEEKS:
            raise DomainError(f"No week for intent '{selector}'")
        selector = INTENT_WEEKS[selector]
    try:
        zone = ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise DomainError(f"Unknown timezone '{tz}'") from e

    try:
        if now is None:
            now = datetime.now(zone)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=zone)
        else:
            now = now.astimezone(zone)
        year, week, _ = now.isocalendar()
        monday = datetime.fromisocalendar(year, week, 1)
        # wall-clock arithmetic so DST weeks still start at local midnight
        start = (monday + WEEK * int(selector)).replace(tzinfo=zone)
        end = (monday + WEEK * (int(selector) + 1)).replace(tzinfo=zone) - ONE_MS
    except (ValueError, OverflowError) as e:
        raise DomainError(f"Week calculation failed: {e}") from e
    return WeekRange(start=_to_ms(start), end=_to_ms(end))
