"""Scheduling, pricing and dashboard analytics for RenewalVault."""

from analytics.dashboard import (
    apply_filter,
    build_items_frame,
    has_multiple_currencies,
    summarize,
    totals_by_currency,
)
from analytics.gating import (
    FREE_TIER_LIMITS,
    ProUpgradeAction,
    can_access_dashboard,
    can_add_attachment,
    can_create_item,
    can_create_vault,
    can_export_pdf,
    upgrade_actions,
)
from analytics.listing import filter_items, group_by_bucket, vault_label
from analytics.pricing import CurrencySymbol, format_totals, parse_amount, price_text, resolve_currency
from analytics.reminder_options import PRESET_DAYS, available_days, normalized, parse_custom, toggle
from analytics.reporting import VaultReport, build_vault_report
from analytics.scheduling import (
    SOON_WINDOW_DAYS,
    ReminderRequest,
    bucket,
    days_until_expiry,
    plan_reminders,
    reminder_dates,
)

__all__ = [
    "apply_filter",
    "build_items_frame",
    "has_multiple_currencies",
    "summarize",
    "totals_by_currency",
    "FREE_TIER_LIMITS",
    "ProUpgradeAction",
    "can_access_dashboard",
    "can_add_attachment",
    "can_create_item",
    "can_create_vault",
    "can_export_pdf",
    "upgrade_actions",
    "filter_items",
    "group_by_bucket",
    "vault_label",
    "CurrencySymbol",
    "format_totals",
    "parse_amount",
    "price_text",
    "resolve_currency",
    "PRESET_DAYS",
    "available_days",
    "normalized",
    "parse_custom",
    "toggle",
    "VaultReport",
    "build_vault_report",
    "SOON_WINDOW_DAYS",
    "ReminderRequest",
    "bucket",
    "days_until_expiry",
    "plan_reminders",
    "reminder_dates",
]
