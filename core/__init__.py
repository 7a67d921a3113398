"""Core domain package for the RenewalVault engine."""

from .calendar import RenewalCalendar, default_calendar
from .exceptions import ProtectedVaultError, RenewalVaultError
from .lifecycle import default_renewal_date, mark_no_renewal, reactivate, renew, renewal_history
from .models import (
    DashboardCurrencyTotal,
    DashboardFilter,
    DashboardMonthGroup,
    DashboardSummary,
    DateFilter,
    Item,
    ItemBucket,
    ItemCategory,
    MonthFilter,
    MonthYearFilter,
    NoDateFilter,
    PriceFilter,
    RenewalEvent,
    SubscriptionTier,
    Vault,
    YearFilter,
)
from .vaults import bootstrap_vaults, can_delete_vault, ensure_deletable, is_protected_default

__all__ = [
    "RenewalCalendar",
    "default_calendar",
    "RenewalVaultError",
    "ProtectedVaultError",
    "default_renewal_date",
    "mark_no_renewal",
    "reactivate",
    "renew",
    "renewal_history",
    "DashboardCurrencyTotal",
    "DashboardFilter",
    "DashboardMonthGroup",
    "DashboardSummary",
    "DateFilter",
    "Item",
    "ItemBucket",
    "ItemCategory",
    "MonthFilter",
    "MonthYearFilter",
    "NoDateFilter",
    "PriceFilter",
    "RenewalEvent",
    "SubscriptionTier",
    "Vault",
    "YearFilter",
    "bootstrap_vaults",
    "can_delete_vault",
    "ensure_deletable",
    "is_protected_default",
]
