"""SQLAlchemy unit of work: one session, one transaction."""

import logging
from types import TracebackType
from typing import Callable, Optional

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session, sessionmaker

from bankledger.core.exceptions import AppError, LockTimeoutError, StoreUnavailableError
from bankledger.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from bankledger.repositories.sqlalchemy.database import BEGIN_IMMEDIATE

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATEs that mean "lost a lock race, try again"
LOCK_SQLSTATES = {
    "55P03",  # lock_not_available (lock_timeout)
    "40P01",  # deadlock_detected
    "40001",  # serialization_failure
}


def translate_db_error(exc: DBAPIError) -> AppError:
    """Map a driver error to a retryable application error without leaking details."""
    orig = getattr(exc, "orig", None)
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate in LOCK_SQLSTATES or "database is locked" in str(orig):
        return LockTimeoutError()
    return StoreUnavailableError()


class SqlAlchemyUnitOfWork:
    """
    Atomic unit of work over a fresh session.

    Entering opens the transaction (BEGIN IMMEDIATE on SQLite, a bounded
    lock_timeout on PostgreSQL). A clean exit commits; any exception,
    including cancellation, rolls back every write made through ``accounts``.
    Driver errors leave as LockTimeoutError or StoreUnavailableError.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        lock_timeout_ms: int = 5000,
        iban_formatter: Optional[Callable[[int], str]] = None,
    ):
        self._session_factory = session_factory
        self._lock_timeout_ms = lock_timeout_ms
        self._iban_formatter = iban_formatter
        self._session: Optional[Session] = None
        self.accounts: Optional[SqlAlchemyAccountRepository] = None

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        if self._session is not None:
            raise RuntimeError("Unit of work is already active")

        session = self._session_factory()
        try:
            connection = session.connection(execution_options={BEGIN_IMMEDIATE: True})
            if connection.dialect.name == "postgresql":
                session.execute(
                    text(f"SET LOCAL lock_timeout = '{int(self._lock_timeout_ms)}ms'")
                )
        except DBAPIError as exc:
            session.close()
            logger.warning("Could not open unit of work: %s", exc.__class__.__name__)
            raise translate_db_error(exc) from exc

        self._session = session
        self.accounts = SqlAlchemyAccountRepository(session, self._iban_formatter)
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        session = self._session
        self._session = None
        self.accounts = None

        try:
            if exc_type is None:
                session.commit()
            else:
                session.rollback()
        except DBAPIError as db_exc:
            logger.warning("Unit of work failed to finish: %s", db_exc.__class__.__name__)
            session.rollback()
            raise translate_db_error(db_exc) from db_exc
        finally:
            session.close()

        if isinstance(exc, DBAPIError):
            logger.warning("Unit of work rolled back after store error: %s", exc.__class__.__name__)
            raise translate_db_error(exc) from exc
