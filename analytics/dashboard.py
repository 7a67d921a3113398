"""Dashboard filtering, per-currency totals and upcoming-renewal grouping."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from analytics.pricing import resolve_currency
from core.calendar import RenewalCalendar, default_calendar
from core.models import (
    DashboardCurrencyTotal,
    DashboardFilter,
    DashboardMonthGroup,
    DashboardSummary,
    Item,
    MonthFilter,
    MonthYearFilter,
    PriceFilter,
    YearFilter,
)

__all__ = [
    "build_items_frame",
    "apply_filter",
    "summarize",
    "totals_by_currency",
    "has_multiple_currencies",
]

logger = logging.getLogger(__name__)

_FRAME_DTYPES = {
    "position": "int64",
    "ordinal": "int64",
    "year": "int64",
    "month": "int64",
    "amount": "float64",
    "currency": "object",
    "completed": "bool",
}


def build_items_frame(
    items: Sequence[Item],
    calendar: RenewalCalendar,
    default_currency: Optional[str] = None,
) -> pd.DataFrame:
    """Flatten ``items`` into one row per item.

    ``position`` indexes back into ``items``; ``amount`` is NaN for items
    without a price and ``currency`` is already resolved to the default when
    the item has none.
    """

    records: list[dict[str, object]] = []
    for position, item in enumerate(items):
        expiry = calendar.local_date(item.expiry_date)
        records.append(
            {
                "position": position,
                "ordinal": expiry.toordinal(),
                "year": expiry.year,
                "month": expiry.month,
                "amount": np.nan if item.price_amount is None else float(item.price_amount),
                "currency": resolve_currency(item.price_currency, default_currency),
                "completed": bool(item.is_completed),
            }
        )

    return pd.DataFrame(records, columns=list(_FRAME_DTYPES)).astype(_FRAME_DTYPES)


def _filter_mask(frame: pd.DataFrame, dashboard_filter: DashboardFilter, current_year: int) -> pd.Series:
    everything = pd.Series(True, index=frame.index, dtype=bool)
    priced = frame["amount"].notna()

    if dashboard_filter.price_filter == PriceFilter.PRICED_ONLY:
        price_match = priced
    elif dashboard_filter.price_filter == PriceFilter.FREE_ONLY:
        price_match = ~priced
    else:
        price_match = everything

    paid_match = frame["completed"] if dashboard_filter.paid_only else everything

    date_filter = dashboard_filter.date_filter
    if isinstance(date_filter, YearFilter):
        date_match = frame["year"] == date_filter.year
    elif isinstance(date_filter, MonthFilter):
        date_match = (frame["month"] == date_filter.month) & (frame["year"] == current_year)
    elif isinstance(date_filter, MonthYearFilter):
        date_match = (frame["month"] == date_filter.month) & (frame["year"] == date_filter.year)
    else:
        date_match = everything

    return price_match & paid_match & date_match


def apply_filter(
    items: Iterable[Item],
    dashboard_filter: Optional[DashboardFilter] = None,
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
) -> list[Item]:
    """Return the items passing every axis of ``dashboard_filter``, in input order."""

    items = list(items)
    calendar = calendar or default_calendar()
    dashboard_filter = dashboard_filter or DashboardFilter.default()

    frame = build_items_frame(items, calendar)
    mask = _filter_mask(frame, dashboard_filter, calendar.today(now).year)
    return [items[position] for position in frame.loc[mask, "position"]]


def _currency_totals(frame: pd.DataFrame) -> list[DashboardCurrencyTotal]:
    priced = frame[frame["amount"].notna() & (frame["amount"] >= 0)]
    if priced.empty:
        return []

    totals = priced.groupby("currency", sort=True)["amount"].sum()
    return [
        DashboardCurrencyTotal(currency=str(currency), amount=float(amount))
        for currency, amount in totals.items()
    ]


def totals_by_currency(
    items: Iterable[Item],
    default_currency: Optional[str] = None,
    calendar: Optional[RenewalCalendar] = None,
) -> list[DashboardCurrencyTotal]:
    """Sum priced items per currency, ascending by currency key.

    Items without a currency count under ``default_currency``. Absent and
    negative amounts are left out entirely.
    """

    frame = build_items_frame(list(items), calendar or default_calendar(), default_currency)
    return _currency_totals(frame)


def has_multiple_currencies(items: Iterable[Item], default_currency: Optional[str] = None) -> bool:
    currencies = {
        resolve_currency(item.price_currency, default_currency)
        for item in items
        if item.price_amount is not None
    }
    return len(currencies) > 1


def _group_by_month(
    filtered: pd.DataFrame,
    items: Sequence[Item],
    month_start: date,
    include_past: bool,
) -> list[DashboardMonthGroup]:
    candidates = filtered if include_past else filtered[filtered["ordinal"] >= month_start.toordinal()]
    candidates = candidates.sort_values("ordinal", kind="stable")

    groups: list[DashboardMonthGroup] = []
    for (year, month), group_df in candidates.groupby(["year", "month"], sort=True):
        groups.append(
            DashboardMonthGroup(
                month_start=date(int(year), int(month), 1),
                items=tuple(items[position] for position in group_df["position"]),
            )
        )
    return groups


def summarize(
    items: Iterable[Item],
    now: Optional[datetime] = None,
    calendar: Optional[RenewalCalendar] = None,
    dashboard_filter: Optional[DashboardFilter] = None,
    default_currency: Optional[str] = None,
) -> DashboardSummary:
    """Build the dashboard view-model for ``items`` as of ``now``.

    Year and next-month totals only count open priced items; the target year
    and month come from the date filter when it names them, otherwise from
    the current year and the month after ``now``. Paid totals ignore those
    targets. Month groups start at the current month unless the filter asks
    for paid items only, in which case the whole paid history is grouped.
    """

    items = list(items)
    calendar = calendar or default_calendar()
    dashboard_filter = dashboard_filter or DashboardFilter.default()
    today = calendar.today(now)

    frame = build_items_frame(items, calendar, default_currency)
    filtered = frame[_filter_mask(frame, dashboard_filter, today.year)]

    date_filter = dashboard_filter.date_filter
    next_month = calendar.month_period(today) + 1
    target_year = date_filter.year_value if date_filter.year_value is not None else today.year
    target_next_month = date_filter.month_value if date_filter.month_value is not None else next_month.month
    target_next_year = date_filter.year_value if date_filter.year_value is not None else next_month.year

    priced = filtered["amount"].notna()
    open_priced = priced & ~filtered["completed"]

    year_to_pay = filtered[open_priced & (filtered["year"] == target_year)]
    next_month_to_pay = filtered[
        open_priced & (filtered["month"] == target_next_month) & (filtered["year"] == target_next_year)
    ]
    paid = filtered[priced & filtered["completed"]]

    groups = _group_by_month(filtered, items, calendar.month_start(today), dashboard_filter.paid_only)

    logger.debug(
        "Dashboard summary: %d items, %d after filter, %d month groups",
        len(items),
        len(filtered),
        len(groups),
    )

    return DashboardSummary(
        year_to_pay_totals=tuple(_currency_totals(year_to_pay)),
        next_month_to_pay_totals=tuple(_currency_totals(next_month_to_pay)),
        paid_totals=tuple(_currency_totals(paid)),
        grouped_renewals=tuple(groups),
    )
