"""Home list filtering and urgency sections."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID

from analytics.scheduling import bucket
from core.calendar import RenewalCalendar, default_calendar
from core.models import Item, ItemBucket, ItemCategory, Vault

__all__ = [
    "NO_VAULT_LABEL",
    "BUCKET_ORDER",
    "filter_items",
    "group_by_bucket",
    "vault_label",
]

NO_VAULT_LABEL = "-"
BUCKET_ORDER: tuple[ItemBucket, ...] = (ItemBucket.SOON, ItemBucket.LATER, ItemBucket.EXPIRED)


def _matches_query(item: Item, query: str) -> bool:
    if not query:
        return True
    needle = query.casefold()
    if needle in item.title.casefold():
        return True
    return item.issuer is not None and needle in item.issuer.casefold()


def filter_items(
    items: Iterable[Item],
    query: str = "",
    vault_id: Optional[UUID] = None,
    category: Optional[ItemCategory] = None,
    upcoming_only: bool = False,
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
) -> list[Item]:
    """Return matching items sorted by expiry date.

    ``query`` matches title or issuer case-insensitively; ``upcoming_only``
    keeps items expiring today or later.
    """

    calendar = calendar or default_calendar()
    today = calendar.today(now)
    query = query.strip()

    matches = [
        item
        for item in items
        if _matches_query(item, query)
        and (vault_id is None or item.vault_id == vault_id)
        and (category is None or item.category == category)
        and (not upcoming_only or calendar.local_date(item.expiry_date) >= today)
    ]
    return sorted(matches, key=lambda item: calendar.local_date(item.expiry_date))


def group_by_bucket(
    items: Iterable[Item],
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
) -> dict[ItemBucket, list[Item]]:
    """Split ``items`` into soon/later/expired sections, each in expiry order."""

    calendar = calendar or default_calendar()
    now = now or calendar.now()
    sections: dict[ItemBucket, list[Item]] = {key: [] for key in BUCKET_ORDER}
    for item in sorted(items, key=lambda item: calendar.local_date(item.expiry_date)):
        sections[bucket(item, now, calendar)].append(item)
    return sections


def vault_label(item: Item, vaults: Iterable[Vault]) -> str:
    """Name of the item's vault, or ``"-"`` when the item has no vault in the snapshot."""

    if item.vault_id is None:
        return NO_VAULT_LABEL
    for vault in vaults:
        if vault.id == item.vault_id:
            return vault.name
    return NO_VAULT_LABEL
