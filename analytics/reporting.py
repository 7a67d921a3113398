"""Figures shown in the per-vault export report."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, TypedDict

from analytics.dashboard import totals_by_currency
from analytics.pricing import format_totals
from core.calendar import RenewalCalendar, default_calendar
from core.models import Item, Vault

__all__ = ["VaultReport", "build_vault_report"]


class VaultReport(TypedDict):
    vault_name: str
    item_count: int
    items: list[Item]
    current_year: int
    current_year_total_text: str
    all_priced_total_text: str


def build_vault_report(
    vault: Vault,
    items: Iterable[Item],
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
    default_currency: Optional[str] = None,
) -> VaultReport:
    """Collect the vault's items and their price totals for export.

    Only items whose ``vault_id`` points at ``vault`` are included. Totals are
    rendered per currency and joined, with ``"—"`` standing in for no priced
    items.
    """

    calendar = calendar or default_calendar()
    current_year = calendar.today(now).year

    vault_items = sorted(
        (item for item in items if item.vault_id == vault.id),
        key=lambda item: calendar.local_date(item.expiry_date),
    )
    current_year_items = [
        item for item in vault_items if calendar.local_date(item.expiry_date).year == current_year
    ]

    return {
        "vault_name": vault.name,
        "item_count": len(vault_items),
        "items": vault_items,
        "current_year": current_year,
        "current_year_total_text": format_totals(
            totals_by_currency(current_year_items, default_currency, calendar)
        ),
        "all_priced_total_text": format_totals(totals_by_currency(vault_items, default_currency, calendar)),
    }
