"""Exception hierarchy for the RenewalVault engine."""

from __future__ import annotations

__all__ = ["RenewalVaultError", "ProtectedVaultError"]


class RenewalVaultError(Exception):
    """Base exception for engine policy errors."""


class ProtectedVaultError(RenewalVaultError):
    """Raised when a protected default vault is about to be deleted."""

    def __init__(self, vault_name: str) -> None:
        super().__init__(f"Vault '{vault_name}' is the protected default vault and cannot be deleted.")
        self.vault_name = vault_name
