"""Account repository protocol."""

from typing import Protocol, Optional

from bankledger.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account; the store assigns account_id and IBAN."""
        ...

    def get_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        ...

    def get_by_iban(self, iban: str) -> Optional[Account]:
        """Retrieve account by IBAN."""
        ...

    def delete(self, account_id: int) -> bool:
        """Delete an account (hard delete). Returns False if it did not exist."""
        ...

    def lock_for_update(self, iban: str) -> int:
        """
        Take an exclusive lock on the account row and return its balance.

        Only valid inside an active unit of work. Raises AccountNotFoundError
        if the IBAN does not resolve.
        """
        ...

    def set_balance(self, iban: str, new_balance: int) -> None:
        """Write a new balance inside the active unit of work."""
        ...
