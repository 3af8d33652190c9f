"""Account service: creation, lookup, deletion and login."""

import logging

from bankledger.core.exceptions import (
    AccountNotFoundError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from bankledger.core.money import MAX_MINOR_UNITS, format_minor_units
from bankledger.core.timezone import now_utc
from bankledger.domain.models import Account, AuthenticatedAccount
from bankledger.repositories.protocols import AccountRepository, UnitOfWorkFactory
from bankledger.services.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 70


class AccountService:
    """
    Service for account lifecycle and authentication.

    Reads go through the request-scoped repository; every write runs in its
    own unit of work so a new account and its IBAN are committed together.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        unit_of_work: UnitOfWorkFactory,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        password_min_length: int = 8,
    ):
        self._account_repo = account_repo
        self._unit_of_work = unit_of_work
        self._password_hasher = password_hasher
        self._token_service = token_service
        self._password_min_length = password_min_length

    def create_account(
        self,
        first_name: str,
        last_name: str,
        password: str,
        opening_balance: int = 0,
    ) -> Account:
        """
        Create a new account.

        Args:
            first_name: Owner first name
            last_name: Owner last name
            password: Plain password; only its salted hash is stored
            opening_balance: Starting balance in minor units

        Returns:
            Created Account with store-assigned id and IBAN
        """
        first_name = self._clean_name(first_name, "First name")
        last_name = self._clean_name(last_name, "Last name")
        if len(password) < self._password_min_length:
            raise ValidationError(
                f"Password must be at least {self._password_min_length} characters"
            )
        if opening_balance < 0:
            raise ValidationError("Opening balance cannot be negative")
        if opening_balance > MAX_MINOR_UNITS:
            raise ValidationError(
                f"Opening balance cannot exceed {format_minor_units(MAX_MINOR_UNITS)}"
            )

        account = Account(
            account_id=None,
            iban=None,
            first_name=first_name,
            last_name=last_name,
            password_hash=self._password_hasher.hash(password),
            balance=opening_balance,
            created_at=now_utc(),
        )
        with self._unit_of_work() as uow:
            created = uow.accounts.create(account)

        logger.info("Created account %s (id=%s)", created.iban, created.account_id)
        return created

    def get_account(self, account_id: int) -> Account:
        """Get account by ID."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(str(account_id))
        return account

    def get_account_by_iban(self, iban: str) -> Account:
        """Get account by IBAN."""
        account = self._account_repo.get_by_iban(iban)
        if not account:
            raise AccountNotFoundError(iban)
        return account

    def delete_account(self, account_id: int, caller: AuthenticatedAccount) -> None:
        """Delete the caller's own account."""
        if caller.account_id != account_id:
            raise ForbiddenError()

        with self._unit_of_work() as uow:
            deleted = uow.accounts.delete(account_id)
        if not deleted:
            raise AccountNotFoundError(str(account_id))

        logger.info("Deleted account id=%s", account_id)

    def login(self, iban: str, password: str) -> str:
        """Check credentials and return a bearer token."""
        account = self._account_repo.get_by_iban(iban)
        if account is None or not self._password_hasher.verify(password, account.password_hash):
            # Same answer for unknown IBAN and wrong password
            raise UnauthorizedError("Invalid IBAN or password")
        return self._token_service.issue(account)

    @staticmethod
    def _clean_name(value: str, label: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValidationError(f"{label} is required")
        if len(cleaned) > NAME_MAX_LENGTH:
            raise ValidationError(f"{label} must be at most {NAME_MAX_LENGTH} characters")
        return cleaned
