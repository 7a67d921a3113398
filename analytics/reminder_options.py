"""Set algebra over the reminder-day selection of an item."""

from __future__ import annotations

import re
from typing import Iterable, Optional

__all__ = [
    "PRESET_DAYS",
    "normalized",
    "available_days",
    "toggle",
    "parse_custom",
]

PRESET_DAYS: tuple[int, ...] = (90, 60, 30, 14, 7, 1)

_POSITIVE_INTEGER = re.compile(r"\+?[0-9]+")


def normalized(days: Iterable[int]) -> list[int]:
    """Return unique offsets of at least one day, largest first.

    Every other helper in this module funnels its result through here so the
    selection always has the same shape.
    """

    return sorted({int(day) for day in days if day >= 1}, reverse=True)


def available_days(selected: Iterable[int], custom_available: Iterable[int] = ()) -> list[int]:
    """Presets merged with the current selection and any custom entries."""

    return normalized([*PRESET_DAYS, *selected, *custom_available])


def toggle(day: int, selected: Iterable[int]) -> list[int]:
    return normalized(set(selected) ^ {day})


def parse_custom(text: str) -> Optional[int]:
    """Parse a custom reminder offset, returning ``None`` for anything but a positive integer."""

    trimmed = text.strip()
    if not _POSITIVE_INTEGER.fullmatch(trimmed):
        return None
    value = int(trimmed)
    return value if value >= 1 else None
