"""Canonical price text and tolerant amount parsing."""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

from config import get_settings

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from core.models import DashboardCurrencyTotal

__all__ = [
    "CurrencySymbol",
    "TOTALS_SEPARATOR",
    "EMPTY_TOTALS_TEXT",
    "resolve_currency",
    "price_text",
    "parse_amount",
    "format_totals",
]

TOTALS_SEPARATOR = "   •   "
EMPTY_TOTALS_TEXT = "—"

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class CurrencySymbol(str, Enum):
    EURO = "€"
    DOLLAR = "$"
    YEN = "¥"
    POUND = "£"


def resolve_currency(currency: Optional[str], default_currency: Optional[str] = None) -> str:
    """Return ``currency`` or the default currency when it is missing or empty."""

    if currency:
        return currency
    return default_currency or get_settings().default_currency


def price_text(
    amount: Optional[float],
    currency: Optional[str],
    default_currency: Optional[str] = None,
) -> Optional[str]:
    """Render ``amount`` as ``<currency><amount>`` with two decimals, e.g. ``€12.50``.

    Absent and negative amounts have no text.
    """

    if amount is None or amount < 0:
        return None
    return f"{resolve_currency(currency, default_currency)}{amount:.2f}"


def parse_amount(text: str) -> Optional[float]:
    """Parse a user-entered amount, accepting either ``.`` or ``,`` as decimal separator.

    Returns ``None`` for empty, malformed, non-finite or negative input.
    """

    trimmed = text.strip()
    if not trimmed:
        return None

    candidate = trimmed.replace(",", ".")
    if not _DECIMAL_LITERAL.fullmatch(candidate):
        return None

    value = float(candidate)
    if not np.isfinite(value) or value < 0:
        return None
    return abs(value)  # folds "-0" into 0.0


def format_totals(
    totals: Iterable["DashboardCurrencyTotal"],
    separator: str = TOTALS_SEPARATOR,
) -> str:
    parts = [text for total in totals if (text := price_text(total.amount, total.currency)) is not None]
    if not parts:
        return EMPTY_TOTALS_TEXT
    return separator.join(parts)
