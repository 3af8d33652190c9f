"""Service layer - business logic orchestration."""

from bankledger.services.security import PasswordHasher, TokenService
from bankledger.services.account_service import AccountService
from bankledger.services.transfer_engine import TransferEngine

__all__ = [
    "PasswordHasher",
    "TokenService",
    "AccountService",
    "TransferEngine",
]
