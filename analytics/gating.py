"""Free versus pro admission checks for gated actions."""

from __future__ import annotations

from enum import Enum
from typing import Final, Mapping

from core.models import SubscriptionTier

__all__ = [
    "FREE_TIER_LIMITS",
    "ProUpgradeAction",
    "can_create_vault",
    "can_create_item",
    "can_add_attachment",
    "can_export_pdf",
    "can_access_dashboard",
    "upgrade_actions",
]

FREE_TIER_LIMITS: Final[Mapping[str, int]] = {
    "vaults": 1,
    "items": 5,
    "attachments": 3,
}


class ProUpgradeAction(str, Enum):
    CLOSE = "close"
    GO_PRO = "go_pro"


def _within_allowance(current_count: int, tier: SubscriptionTier, resource: str) -> bool:
    return tier == SubscriptionTier.PRO or current_count < FREE_TIER_LIMITS[resource]


def can_create_vault(current_count: int, tier: SubscriptionTier) -> bool:
    return _within_allowance(current_count, tier, "vaults")


def can_create_item(current_count: int, tier: SubscriptionTier) -> bool:
    return _within_allowance(current_count, tier, "items")


def can_add_attachment(current_count: int, tier: SubscriptionTier) -> bool:
    return _within_allowance(current_count, tier, "attachments")


def can_export_pdf(tier: SubscriptionTier) -> bool:
    return tier == SubscriptionTier.PRO


def can_access_dashboard(tier: SubscriptionTier) -> bool:
    return tier == SubscriptionTier.PRO


def upgrade_actions() -> list[ProUpgradeAction]:
    """Choices offered when a free-tier limit blocks an action."""

    return [ProUpgradeAction.CLOSE, ProUpgradeAction.GO_PRO]
