"""SQLAlchemy implementation of AccountRepository."""

from typing import Callable, Optional

from sqlalchemy.orm import Session

from bankledger.config.settings import get_settings
from bankledger.core.exceptions import AccountNotFoundError
from bankledger.core.identifiers import format_iban
from bankledger.core.timezone import now_utc, to_utc
from bankledger.domain.models import Account
from bankledger.repositories.sqlalchemy.orm_models import AccountORM


def _default_iban_formatter(account_id: int) -> str:
    settings = get_settings()
    return format_iban(account_id, settings.iban_country_code, settings.iban_bank_code)


class SqlAlchemyAccountRepository:
    """
    SQLAlchemy-backed account repository.

    Methods flush but never commit; the surrounding unit of work (or the
    request session) decides when changes become visible.
    """

    def __init__(
        self,
        db: Session,
        iban_formatter: Optional[Callable[[int], str]] = None,
    ):
        self._db = db
        self._format_iban = iban_formatter or _default_iban_formatter

    def create(self, account: Account) -> Account:
        """Persist a new account and assign its IBAN from the new id."""
        orm_account = AccountORM(
            iban=account.iban,
            first_name=account.first_name,
            last_name=account.last_name,
            password_hash=account.password_hash,
            balance=account.balance,
            created_at=account.created_at or now_utc(),
        )
        self._db.add(orm_account)
        self._db.flush()
        if orm_account.iban is None:
            orm_account.iban = self._format_iban(orm_account.account_id)
            self._db.flush()
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        orm_account = self._db.query(AccountORM).populate_existing().filter(
            AccountORM.account_id == account_id
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def get_by_iban(self, iban: str) -> Optional[Account]:
        """Retrieve account by IBAN."""
        orm_account = self._db.query(AccountORM).populate_existing().filter(
            AccountORM.iban == iban
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def delete(self, account_id: int) -> bool:
        """Delete an account."""
        deleted = self._db.query(AccountORM).filter(
            AccountORM.account_id == account_id
        ).delete(synchronize_session=False)
        return deleted > 0

    def lock_for_update(self, iban: str) -> int:
        """Lock the account row (SELECT ... FOR UPDATE) and return its balance."""
        row = (
            self._db.query(AccountORM.balance)
            .filter(AccountORM.iban == iban)
            .with_for_update()
            .first()
        )
        if row is None:
            raise AccountNotFoundError(iban)
        return row.balance

    def set_balance(self, iban: str, new_balance: int) -> None:
        """Write a new balance for a locked account."""
        if new_balance < 0:
            raise ValueError(f"Refusing to write negative balance for {iban}: {new_balance}")
        updated = self._db.query(AccountORM).filter(
            AccountORM.iban == iban
        ).update({AccountORM.balance: new_balance}, synchronize_session=False)
        if updated == 0:
            raise AccountNotFoundError(iban)

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            account_id=orm.account_id,
            iban=orm.iban,
            first_name=orm.first_name,
            last_name=orm.last_name,
            password_hash=orm.password_hash,
            balance=orm.balance,
            created_at=to_utc(orm.created_at) if orm.created_at else None,
        )
