"""Application context: the objects built once at startup.

Settings, the session factory and the token signing key are loaded here and
never change for the life of the process. Request handlers receive them
through FastAPI dependencies instead of reading globals or the environment.
"""

from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from bankledger.config.settings import Settings, get_settings
from bankledger.core.identifiers import format_iban
from bankledger.repositories.sqlalchemy import (
    Base,
    SqlAlchemyAccountRepository,
    SqlAlchemyUnitOfWork,
    get_engine,
)
from bankledger.services import AccountService, PasswordHasher, TokenService, TransferEngine


class AppContext:
    """Application context providing access to configured services."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        engine: Optional[Engine] = None,
        password_hasher: Optional[PasswordHasher] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Settings to use. Defaults to the global settings.
            engine: Database engine. Defaults to the global engine.
            password_hasher: Password hasher. Defaults to scrypt with standard cost.
        """
        self._settings = settings or get_settings()
        self._engine = engine or get_engine()
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self._engine,
        )
        self._password_hasher = password_hasher or PasswordHasher()
        self._token_service = TokenService(
            secret=self._settings.jwt_secret.get_secret_value(),
            issuer=self._settings.jwt_issuer,
            ttl_minutes=self._settings.token_ttl_minutes,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def token_service(self) -> TokenService:
        return self._token_service

    @property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher

    def create_schema(self) -> None:
        """Create tables on the bound engine if they do not exist."""
        from bankledger.repositories.sqlalchemy import orm_models  # noqa: F401

        Base.metadata.create_all(bind=self._engine)

    def format_iban(self, account_id: int) -> str:
        """IBAN for an account id using the configured country and bank code."""
        return format_iban(
            account_id,
            self._settings.iban_country_code,
            self._settings.iban_bank_code,
        )

    def new_session(self) -> Session:
        """Open a session for request-scoped reads."""
        return self._session_factory()

    def unit_of_work(self) -> SqlAlchemyUnitOfWork:
        """Create a fresh unit of work."""
        return SqlAlchemyUnitOfWork(
            self._session_factory,
            lock_timeout_ms=self._settings.lock_timeout_ms,
            iban_formatter=self.format_iban,
        )

    def account_service(self, db: Session) -> AccountService:
        """Build an AccountService reading through the given session."""
        return AccountService(
            account_repo=SqlAlchemyAccountRepository(db, self.format_iban),
            unit_of_work=self.unit_of_work,
            password_hasher=self._password_hasher,
            token_service=self._token_service,
            password_min_length=self._settings.password_min_length,
        )

    def transfer_engine(self) -> TransferEngine:
        """Build a TransferEngine bound to this context's units of work."""
        return TransferEngine(unit_of_work=self.unit_of_work)

    def close(self) -> None:
        """Release pooled database connections."""
        self._engine.dispose()
