"""Repository protocol definitions (interfaces)."""

from bankledger.repositories.protocols.account_repo import AccountRepository
from bankledger.repositories.protocols.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AccountRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
