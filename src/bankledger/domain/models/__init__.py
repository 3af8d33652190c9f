"""Domain models package."""

from bankledger.domain.models.account import Account
from bankledger.domain.models.transfer import TransferIntent, AuthenticatedAccount

__all__ = [
    "Account",
    "TransferIntent",
    "AuthenticatedAccount",
]
