"""Repository layer - data access abstractions and implementations."""

from bankledger.repositories.protocols import (
    AccountRepository,
    UnitOfWork,
    UnitOfWorkFactory,
)

__all__ = [
    "AccountRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
