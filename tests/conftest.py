"""Shared fixtures for the RenewalVault engine tests."""

from __future__ import annotations

import os
import sys
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import get_settings
from core.calendar import RenewalCalendar
from core.models import Item


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep tests independent of ``RENEWALVAULT_*`` variables set on the host."""

    for name in list(os.environ):
        if name.upper().startswith("RENEWALVAULT_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def calendar() -> RenewalCalendar:
    return RenewalCalendar(timezone="UTC")


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 4, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def make_item():
    def _make(expiry: date, **overrides) -> Item:
        overrides.setdefault("title", f"Item {expiry.isoformat()}")
        return Item(expiry_date=expiry, **overrides)

    return _make
