"""Domain layer - pure business models with no external dependencies."""

from bankledger.domain.models import (
    Account,
    TransferIntent,
    AuthenticatedAccount,
)

__all__ = [
    "Account",
    "TransferIntent",
    "AuthenticatedAccount",
]
