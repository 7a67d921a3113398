"""Shared data model definitions for the RenewalVault engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, Union
from uuid import UUID, uuid4

DEFAULT_REMINDER_DAYS: tuple[int, ...] = (30, 14, 7, 1)
PROTECTED_VAULT_NAME = "Personal"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ItemCategory(str, Enum):
    PASSPORT = "passport"
    NATIONAL_ID = "nationalID"
    DRIVERS_LICENSE = "driversLicense"
    CAR_INSURANCE = "carInsurance"
    LEASE = "lease"
    HEALTH_INSURANCE = "healthInsurance"
    SUBSCRIPTION = "subscription"
    OTHER = "other"

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]


_CATEGORY_ICONS = {
    ItemCategory.PASSPORT: "globe",
    ItemCategory.NATIONAL_ID: "person.text.rectangle",
    ItemCategory.DRIVERS_LICENSE: "car",
    ItemCategory.CAR_INSURANCE: "shield.lefthalf.filled",
    ItemCategory.LEASE: "house",
    ItemCategory.HEALTH_INSURANCE: "heart.text.square",
    ItemCategory.SUBSCRIPTION: "creditcard",
    ItemCategory.OTHER: "doc",
}


class ItemBucket(str, Enum):
    SOON = "soon"
    LATER = "later"
    EXPIRED = "expired"


class SubscriptionTier(str, Enum):
    FREE = "free"
    PRO = "pro"


class PriceFilter(str, Enum):
    ALL = "all"
    PRICED_ONLY = "priced_only"
    FREE_ONLY = "free_only"


@dataclass(frozen=True, slots=True)
class Vault:
    name: str
    icon: str = "folder"
    is_system_default: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def is_protected_default(self) -> bool:
        """System default vaults and any vault named "Personal" cannot be deleted."""

        return self.is_system_default or self.name.casefold() == PROTECTED_VAULT_NAME.casefold()


@dataclass(frozen=True, slots=True)
class Item:
    """A tracked document or subscription.

    ``price_amount`` is ``None`` when the item carries no price; zero is a real
    price. ``vault_id`` may reference a vault missing from the snapshot, in
    which case the item is displayed as vault-less.
    """

    title: str
    expiry_date: date
    category: ItemCategory = ItemCategory.OTHER
    issuer: Optional[str] = None
    reminder_days: tuple[int, ...] = DEFAULT_REMINDER_DAYS
    repeat_after_renewal: bool = True
    is_completed: bool = False
    price_amount: Optional[float] = None
    price_currency: Optional[str] = None
    notes: str = ""
    vault_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def has_price(self) -> bool:
        return self.price_amount is not None


@dataclass(frozen=True, slots=True)
class RenewalEvent:
    item_id: UUID
    previous_expiry_date: date
    new_expiry_date: date
    renewed_at: datetime = field(default_factory=_utcnow)
    id: UUID = field(default_factory=uuid4)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")


@dataclass(frozen=True, slots=True)
class NoDateFilter:
    @property
    def year_value(self) -> Optional[int]:
        return None

    @property
    def month_value(self) -> Optional[int]:
        return None


@dataclass(frozen=True, slots=True)
class YearFilter:
    year: int

    @property
    def year_value(self) -> Optional[int]:
        return self.year

    @property
    def month_value(self) -> Optional[int]:
        return None


@dataclass(frozen=True, slots=True)
class MonthFilter:
    """Month of the *current* year; never matches the same month in other years."""

    month: int

    def __post_init__(self) -> None:
        _check_month(self.month)

    @property
    def year_value(self) -> Optional[int]:
        return None

    @property
    def month_value(self) -> Optional[int]:
        return self.month


@dataclass(frozen=True, slots=True)
class MonthYearFilter:
    month: int
    year: int

    def __post_init__(self) -> None:
        _check_month(self.month)

    @property
    def year_value(self) -> Optional[int]:
        return self.year

    @property
    def month_value(self) -> Optional[int]:
        return self.month


DateFilter = Union[NoDateFilter, YearFilter, MonthFilter, MonthYearFilter]


@dataclass(frozen=True, slots=True)
class DashboardFilter:
    price_filter: PriceFilter = PriceFilter.ALL
    paid_only: bool = False
    date_filter: DateFilter = field(default_factory=NoDateFilter)

    @classmethod
    def default(cls) -> "DashboardFilter":
        return cls()


@dataclass(frozen=True, slots=True)
class DashboardCurrencyTotal:
    currency: str
    amount: float

    @property
    def formatted_text(self) -> str:
        from analytics.pricing import price_text

        return price_text(self.amount, self.currency) or "-"


@dataclass(frozen=True, slots=True)
class DashboardMonthGroup:
    month_start: date
    items: tuple[Item, ...]

    @property
    def label(self) -> str:
        return self.month_start.strftime("%B %Y")


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    year_to_pay_totals: tuple[DashboardCurrencyTotal, ...]
    next_month_to_pay_totals: tuple[DashboardCurrencyTotal, ...]
    paid_totals: tuple[DashboardCurrencyTotal, ...]
    grouped_renewals: tuple[DashboardMonthGroup, ...]

    @property
    def has_multiple_currencies(self) -> bool:
        currencies = {
            total.currency
            for totals in (self.year_to_pay_totals, self.next_month_to_pay_totals, self.paid_totals)
            for total in totals
        }
        return len(currencies) > 1


__all__ = [
    "DEFAULT_REMINDER_DAYS",
    "PROTECTED_VAULT_NAME",
    "ItemCategory",
    "ItemBucket",
    "SubscriptionTier",
    "PriceFilter",
    "Vault",
    "Item",
    "RenewalEvent",
    "NoDateFilter",
    "YearFilter",
    "MonthFilter",
    "MonthYearFilter",
    "DateFilter",
    "DashboardFilter",
    "DashboardCurrencyTotal",
    "DashboardMonthGroup",
    "DashboardSummary",
]
