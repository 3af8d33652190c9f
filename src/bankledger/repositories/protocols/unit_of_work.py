"""Unit of work protocol."""

from types import TracebackType
from typing import Protocol, Optional

from bankledger.repositories.protocols.account_repo import AccountRepository


class UnitOfWork(Protocol):
    """
    One atomic group of reads and writes against the store.

    Used as a context manager. Leaving the block normally commits; leaving it
    with an exception rolls back every write made through ``accounts``.
    """

    accounts: AccountRepository

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        ...


class UnitOfWorkFactory(Protocol):
    """Callable producing a fresh, unopened unit of work."""

    def __call__(self) -> UnitOfWork:
        ...
