"""Reminder trigger dates and urgency buckets for tracked items."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional, TypedDict

from config import Settings, get_settings
from core.calendar import RenewalCalendar, default_calendar
from core.models import Item, ItemBucket

__all__ = [
    "SOON_WINDOW_DAYS",
    "MESSAGE_EXPIRES_IN",
    "MESSAGE_EXPIRED",
    "ReminderRequest",
    "reminder_dates",
    "days_until_expiry",
    "bucket",
    "plan_reminders",
]

logger = logging.getLogger(__name__)

SOON_WINDOW_DAYS = 30

MESSAGE_EXPIRES_IN = "notification.expires_in"
MESSAGE_EXPIRED = "notification.expired"


class ReminderRequest(TypedDict):
    """What a notification collaborator needs to deliver one reminder."""

    identifier: str
    item_id: str
    title: str
    trigger_date: date
    fire_at: datetime
    message_key: str
    days_remaining: int


def reminder_dates(
    expiry_date: date,
    reminder_days: Iterable[int],
    calendar: Optional[RenewalCalendar] = None,
) -> list[date]:
    """Return the dates reminders fire on, ascending and without duplicates.

    Negative offsets are ignored; a zero offset fires on the expiry date.
    Offsets that push the date outside the calendar are dropped while the
    remaining ones are still computed.
    """

    calendar = calendar or default_calendar()
    expiry = calendar.local_date(expiry_date)

    dates: set[date] = set()
    for offset in dict.fromkeys(day for day in reminder_days if day >= 0):
        trigger = calendar.subtract_days(expiry, offset)
        if trigger is None:
            logger.debug("Dropping reminder offset %s for expiry %s: out of calendar range", offset, expiry)
            continue
        dates.add(trigger)

    return sorted(dates)


def days_until_expiry(
    item: Item,
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
) -> int:
    """Whole days from the start of today to the start of the expiry day."""

    calendar = calendar or default_calendar()
    return calendar.days_between(calendar.today(now), calendar.local_date(item.expiry_date))


def bucket(
    item: Item,
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
) -> ItemBucket:
    days = days_until_expiry(item, now, calendar)
    if days < 0:
        return ItemBucket.EXPIRED
    if days <= SOON_WINDOW_DAYS:
        return ItemBucket.SOON
    return ItemBucket.LATER


def plan_reminders(
    item: Item,
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
    settings: Optional[Settings] = None,
) -> list[ReminderRequest]:
    """Describe the reminders to schedule for ``item``.

    Completed items get none. Each request fires at the configured local time
    on its trigger date; identifiers follow trigger order so rescheduling can
    cancel the previous batch by id.
    """

    if item.is_completed:
        return []

    calendar = calendar or default_calendar()
    settings = settings or get_settings()

    days = days_until_expiry(item, now, calendar)
    message_key = MESSAGE_EXPIRED if days < 0 else MESSAGE_EXPIRES_IN

    requests: list[ReminderRequest] = []
    for index, trigger in enumerate(reminder_dates(item.expiry_date, item.reminder_days, calendar)):
        requests.append(
            {
                "identifier": f"item-{item.id}-{index}",
                "item_id": str(item.id),
                "title": item.title,
                "trigger_date": trigger,
                "fire_at": calendar.at_time(trigger, settings.reminder_hour, settings.reminder_minute),
                "message_key": message_key,
                "days_remaining": max(days, 0),
            }
        )

    logger.debug("Planned %d reminders for item %s", len(requests), item.id)
    return requests
