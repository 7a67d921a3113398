"""Item lifecycle transitions: renewal, no-renewal and reactivation."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional

from config import get_settings
from core.models import Item, RenewalEvent

__all__ = [
    "mark_no_renewal",
    "reactivate",
    "default_renewal_date",
    "renew",
    "renewal_history",
]


def _resolve_now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


def mark_no_renewal(item: Item, now: Optional[datetime] = None) -> Item:
    """Close ``item`` for good: completed and not repeating."""

    return replace(item, repeat_after_renewal=False, is_completed=True, updated_at=_resolve_now(now))


def reactivate(item: Item, now: Optional[datetime] = None) -> Item:
    return replace(item, repeat_after_renewal=True, is_completed=False, updated_at=_resolve_now(now))


def default_renewal_date(item: Item, interval_days: Optional[int] = None) -> date:
    """Suggested next expiry date, ``interval_days`` after the current one."""

    if interval_days is None:
        interval_days = get_settings().renewal_interval_days
    return item.expiry_date + timedelta(days=interval_days)


def renew(
    item: Item,
    new_expiry_date: Optional[date] = None,
    now: Optional[datetime] = None,
) -> tuple[Item, RenewalEvent]:
    """Move ``item`` to a new expiry date and record the renewal."""

    now = _resolve_now(now)
    if new_expiry_date is None:
        new_expiry_date = default_renewal_date(item)

    event = RenewalEvent(
        item_id=item.id,
        previous_expiry_date=item.expiry_date,
        new_expiry_date=new_expiry_date,
        renewed_at=now,
    )
    return replace(item, expiry_date=new_expiry_date, updated_at=now), event


def renewal_history(events: Iterable[RenewalEvent]) -> list[RenewalEvent]:
    return sorted(events, key=lambda event: event.renewed_at, reverse=True)
