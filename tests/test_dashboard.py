"""Tests for dashboard filtering, per-currency totals and month grouping."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from analytics.dashboard import (
    apply_filter,
    build_items_frame,
    has_multiple_currencies,
    summarize,
    totals_by_currency,
)
from core.models import (
    DashboardFilter,
    MonthFilter,
    MonthYearFilter,
    NoDateFilter,
    PriceFilter,
    YearFilter,
)


def _pairs(totals):
    return [(total.currency, total.amount) for total in totals]


@pytest.fixture()
def mixed_items(make_item):
    return [
        make_item(date(2024, 5, 3), title="Car insurance", price_amount=10.0, price_currency="€"),
        make_item(date(2024, 8, 20), title="Gym", price_amount=15.0, price_currency="€"),
        make_item(date(2024, 11, 1), title="Cloud storage", price_amount=20.0, price_currency="$"),
        make_item(date(2024, 6, 30), title="Passport"),
    ]


def test_year_to_pay_totals_per_currency(mixed_items, calendar, now):
    summary = summarize(mixed_items, now, calendar)

    assert _pairs(summary.year_to_pay_totals) == [("$", 20.0), ("€", 25.0)]
    assert summary.has_multiple_currencies


def test_paid_totals_only_count_completed_priced_items(make_item, calendar, now):
    items = [
        make_item(date(2024, 2, 1), price_amount=5.0, price_currency="€", is_completed=True),
        make_item(date(2023, 9, 1), price_amount=7.0, price_currency="€", is_completed=True),
        make_item(date(2024, 5, 1), price_amount=3.0, price_currency="€"),
        make_item(date(2024, 3, 1), is_completed=True),
    ]

    summary = summarize(items, now, calendar)

    assert _pairs(summary.paid_totals) == [("€", 12.0)]
    assert _pairs(summary.year_to_pay_totals) == [("€", 3.0)]


def test_missing_currency_counts_as_default_currency(make_item, calendar):
    items = [
        make_item(date(2024, 5, 1), price_amount=5.0),
        make_item(date(2024, 5, 2), price_amount=7.0, price_currency="€"),
        make_item(date(2024, 5, 3), price_amount=1.0, price_currency=""),
    ]

    assert _pairs(totals_by_currency(items, calendar=calendar)) == [("€", 13.0)]
    assert _pairs(totals_by_currency(items, default_currency="$", calendar=calendar)) == [("$", 6.0), ("€", 7.0)]


def test_negative_and_absent_amounts_are_excluded(make_item, calendar):
    items = [
        make_item(date(2024, 5, 1), price_amount=-4.0, price_currency="€"),
        make_item(date(2024, 5, 1), price_amount=3.0, price_currency="€"),
        make_item(date(2024, 5, 1), price_amount=-9.0, price_currency="$"),
        make_item(date(2024, 5, 1)),
        make_item(date(2024, 5, 1), price_amount=0.0, price_currency="¥"),
    ]

    assert _pairs(totals_by_currency(items, calendar=calendar)) == [("¥", 0.0), ("€", 3.0)]


def test_next_month_to_pay_defaults_to_month_after_now(make_item, calendar, now):
    items = [
        make_item(date(2024, 5, 1), price_amount=4.0, price_currency="€"),
        make_item(date(2024, 5, 31), price_amount=6.0, price_currency="€"),
        make_item(date(2024, 5, 15), price_amount=8.0, price_currency="€", is_completed=True),
        make_item(date(2024, 4, 30), price_amount=100.0, price_currency="€"),
        make_item(date(2025, 5, 1), price_amount=100.0, price_currency="€"),
    ]

    summary = summarize(items, now, calendar)

    assert _pairs(summary.next_month_to_pay_totals) == [("€", 10.0)]


def test_next_month_rolls_over_the_year(make_item, calendar):
    december = datetime(2024, 12, 15, 9, 0, tzinfo=timezone.utc)
    items = [
        make_item(date(2025, 1, 10), price_amount=12.0, price_currency="$"),
        make_item(date(2024, 1, 10), price_amount=99.0, price_currency="$"),
    ]

    summary = summarize(items, december, calendar)

    assert _pairs(summary.next_month_to_pay_totals) == [("$", 12.0)]
    assert _pairs(summary.year_to_pay_totals) == [("$", 99.0)]


def test_month_groups_ascend_from_current_month(make_item, calendar, now):
    june = make_item(date(2024, 6, 5), title="June")
    april = make_item(date(2024, 4, 20), title="April")
    may = make_item(date(2024, 5, 1), title="May")
    march = make_item(date(2024, 3, 28), title="March")
    early_april = make_item(date(2024, 4, 1), title="Early April")

    summary = summarize([june, april, march, may, early_april], now, calendar)
    groups = summary.grouped_renewals

    assert [group.month_start for group in groups] == [date(2024, 4, 1), date(2024, 5, 1), date(2024, 6, 1)]
    assert groups[0].items == (early_april, april)
    assert groups[1].items == (may,)
    assert groups[2].items == (june,)
    assert groups[0].label == "April 2024"


def test_month_groups_keep_input_order_for_same_expiry(make_item, calendar, now):
    first = make_item(date(2024, 5, 2), title="First")
    second = make_item(date(2024, 5, 2), title="Second")
    earlier = make_item(date(2024, 5, 1), title="Earlier")

    summary = summarize([first, second, earlier], now, calendar)

    assert summary.grouped_renewals[0].items == (earlier, first, second)


def test_paid_only_groups_include_history(make_item, calendar, now):
    old_paid = make_item(date(2023, 2, 14), price_amount=30.0, is_completed=True)
    recent_paid = make_item(date(2024, 3, 2), price_amount=12.0, is_completed=True)
    upcoming_open = make_item(date(2024, 5, 2), price_amount=5.0)

    summary = summarize(
        [recent_paid, upcoming_open, old_paid],
        now,
        calendar,
        DashboardFilter(paid_only=True),
    )

    assert [group.month_start for group in summary.grouped_renewals] == [date(2023, 2, 1), date(2024, 3, 1)]
    assert _pairs(summary.paid_totals) == [("€", 42.0)]
    assert summary.year_to_pay_totals == ()


def test_default_filter_is_identity(mixed_items, calendar, now):
    assert apply_filter(mixed_items, DashboardFilter.default(), now, calendar) == mixed_items
    assert apply_filter(mixed_items, None, now, calendar) == mixed_items


def test_price_filters(mixed_items, calendar, now):
    priced = apply_filter(mixed_items, DashboardFilter(price_filter=PriceFilter.PRICED_ONLY), now, calendar)
    free = apply_filter(mixed_items, DashboardFilter(price_filter=PriceFilter.FREE_ONLY), now, calendar)

    assert [item.title for item in priced] == ["Car insurance", "Gym", "Cloud storage"]
    assert [item.title for item in free] == ["Passport"]


def test_filter_axes_are_combined(make_item, calendar, now):
    match = make_item(date(2024, 7, 1), title="Match", price_amount=1.0, is_completed=True)
    items = [
        match,
        make_item(date(2024, 7, 1), title="Open", price_amount=1.0),
        make_item(date(2024, 7, 1), title="Free", is_completed=True),
        make_item(date(2025, 7, 1), title="Other year", price_amount=1.0, is_completed=True),
    ]
    dashboard_filter = DashboardFilter(
        price_filter=PriceFilter.PRICED_ONLY,
        paid_only=True,
        date_filter=YearFilter(2024),
    )

    assert apply_filter(items, dashboard_filter, now, calendar) == [match]


def test_month_filter_is_pinned_to_current_year(make_item, calendar, now):
    this_may = make_item(date(2024, 5, 10), price_amount=2.0)
    next_may = make_item(date(2025, 5, 10), price_amount=3.0)

    filtered = apply_filter([this_may, next_may], DashboardFilter(date_filter=MonthFilter(5)), now, calendar)

    assert filtered == [this_may]


def test_month_year_filter_targets_totals(make_item, calendar, now):
    target = make_item(date(2025, 5, 10), price_amount=3.0, price_currency="$")
    items = [target, make_item(date(2024, 5, 10), price_amount=2.0, price_currency="$")]

    summary = summarize(items, now, calendar, DashboardFilter(date_filter=MonthYearFilter(month=5, year=2025)))

    assert _pairs(summary.year_to_pay_totals) == [("$", 3.0)]
    assert _pairs(summary.next_month_to_pay_totals) == [("$", 3.0)]
    assert [group.items for group in summary.grouped_renewals] == [(target,)]


def test_year_filter_targets_year_totals(make_item, calendar, now):
    items = [
        make_item(date(2025, 2, 1), price_amount=8.0),
        make_item(date(2024, 5, 1), price_amount=1.0),
    ]

    summary = summarize(items, now, calendar, DashboardFilter(date_filter=YearFilter(2025)))

    assert _pairs(summary.year_to_pay_totals) == [("€", 8.0)]
    assert summary.next_month_to_pay_totals == ()


def test_month_components_are_validated():
    with pytest.raises(ValueError):
        MonthFilter(13)
    with pytest.raises(ValueError):
        MonthYearFilter(month=0, year=2024)


def test_date_filter_components():
    assert NoDateFilter().year_value is None
    assert MonthFilter(3).month_value == 3
    assert MonthFilter(3).year_value is None
    assert MonthYearFilter(3, 2026).year_value == 2026
    assert YearFilter(2026).month_value is None


def test_summarize_empty_snapshot(calendar, now):
    summary = summarize([], now, calendar)

    assert summary.year_to_pay_totals == ()
    assert summary.next_month_to_pay_totals == ()
    assert summary.paid_totals == ()
    assert summary.grouped_renewals == ()
    assert not summary.has_multiple_currencies


def test_summarize_is_deterministic(mixed_items, calendar, now):
    assert summarize(mixed_items, now, calendar) == summarize(mixed_items, now, calendar)


def test_has_multiple_currencies(make_item):
    euro = make_item(date(2024, 5, 1), price_amount=1.0, price_currency="€")
    default = make_item(date(2024, 5, 1), price_amount=1.0)
    dollar = make_item(date(2024, 5, 1), price_amount=1.0, price_currency="$")
    unpriced = make_item(date(2024, 5, 1), price_currency="$")

    assert not has_multiple_currencies([euro, default, unpriced])
    assert has_multiple_currencies([euro, dollar])


def test_build_items_frame_columns(mixed_items, calendar):
    frame = build_items_frame(mixed_items, calendar)

    assert list(frame["position"]) == [0, 1, 2, 3]
    assert list(frame["year"]) == [2024, 2024, 2024, 2024]
    assert frame["amount"].isna().tolist() == [False, False, False, True]
    assert list(frame["currency"]) == ["€", "€", "$", "€"]


def test_build_items_frame_for_empty_snapshot(calendar):
    frame = build_items_frame([], calendar)

    assert frame.empty
    assert str(frame["completed"].dtype) == "bool"
