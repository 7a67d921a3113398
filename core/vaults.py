"""Protected default vault policy and first-run bootstrap."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional, Sequence

from core.exceptions import ProtectedVaultError
from core.models import PROTECTED_VAULT_NAME, Vault

__all__ = [
    "is_protected_default",
    "can_delete_vault",
    "ensure_deletable",
    "bootstrap_vaults",
]

logger = logging.getLogger(__name__)


def is_protected_default(vault: Vault) -> bool:
    return vault.is_protected_default


def can_delete_vault(vault: Vault) -> bool:
    return not vault.is_protected_default


def ensure_deletable(vault: Vault) -> None:
    """Raise :class:`ProtectedVaultError` when ``vault`` must be kept."""

    if vault.is_protected_default:
        raise ProtectedVaultError(vault.name)


def bootstrap_vaults(vaults: Sequence[Vault], now: Optional[datetime] = None) -> list[Vault]:
    """Return ``vaults`` healed so that at least one protected default exists.

    An empty snapshot gets a fresh ``Personal`` system vault. A snapshot with
    no protected vault has its oldest vault promoted to system default. A
    snapshot that already holds a protected vault is returned unchanged, which
    makes repeated calls stable.
    """

    now = now or datetime.now(timezone.utc)

    if not vaults:
        logger.info("No vaults found, creating the default %s vault", PROTECTED_VAULT_NAME)
        return [Vault(name=PROTECTED_VAULT_NAME, is_system_default=True, created_at=now, updated_at=now)]

    if any(vault.is_protected_default for vault in vaults):
        return list(vaults)

    oldest = min(vaults, key=lambda vault: vault.created_at)
    logger.info("No protected vault found, promoting '%s' to system default", oldest.name)
    return [
        replace(vault, is_system_default=True, updated_at=now) if vault.id == oldest.id else vault
        for vault in vaults
    ]
