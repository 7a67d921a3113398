"""Calendar context used by the date arithmetic in the engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

import pandas as pd

from config import get_settings

__all__ = ["RenewalCalendar", "default_calendar"]


@dataclass(frozen=True, slots=True)
class RenewalCalendar:
    """Gregorian calendar pinned to a timezone.

    Naive datetimes are read as wall time in ``timezone``; aware datetimes are
    converted to it before taking the calendar date.
    """

    timezone: str = "UTC"

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def now(self) -> datetime:
        return datetime.now(self.tzinfo)

    def local_date(self, value: date | datetime) -> date:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.date()
            return value.astimezone(self.tzinfo).date()
        return value

    def today(self, now: Optional[datetime] = None) -> date:
        return self.local_date(now if now is not None else self.now())

    def subtract_days(self, day: date, days: int) -> Optional[date]:
        """Return ``day - days`` or ``None`` when the result leaves the calendar range."""

        try:
            return day - timedelta(days=days)
        except OverflowError:
            return None

    def add_days(self, day: date, days: int) -> Optional[date]:
        return self.subtract_days(day, -days)

    def days_between(self, start: date, end: date) -> int:
        return (end - start).days

    def month_period(self, day: date) -> pd.Period:
        return pd.Period(year=day.year, month=day.month, freq="M")

    def month_start(self, day: date) -> date:
        return day.replace(day=1)

    def at_time(self, day: date, hour: int, minute: int) -> datetime:
        return datetime.combine(day, time(hour, minute), tzinfo=self.tzinfo)


def default_calendar() -> RenewalCalendar:
    """Return a calendar for the configured timezone."""

    return RenewalCalendar(timezone=get_settings().timezone)
