"""
Pytest configuration and fixtures for bank ledger tests.

This module provides:
- In-memory SQLite database fixtures (shared connection via StaticPool)
- File-backed SQLite fixtures for multi-threaded tests
- Settings, context, service and repository fixtures
- Factory helpers for accounts and authenticated API callers
"""

from decimal import Decimal
from pathlib import Path
from typing import Callable, Optional

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from bankledger.app_context import AppContext
from bankledger.config.settings import Settings, set_settings, reset_settings
from bankledger.core.money import to_minor_units
from bankledger.domain.models import Account
from bankledger.main import create_app
from bankledger.repositories.sqlalchemy.database import Base, create_db_engine
# Import ORM models to register them with Base before creating tables
from bankledger.repositories.sqlalchemy import orm_models  # noqa: F401
from bankledger.repositories.sqlalchemy import SqlAlchemyAccountRepository
from bankledger.services import AccountService, PasswordHasher, TransferEngine

TEST_JWT_SECRET = "test-signing-key-that-is-long-enough-for-hs256"
DEFAULT_PASSWORD = "correct-horse-battery"


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and .env files."""
    reset_settings()
    settings = Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        lock_timeout_ms=5000,
    )
    set_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    """Cheap scrypt parameters so tests do not spend time hashing."""
    return PasswordHasher(n=16, r=8, p=1)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine(test_settings):
    """Create test database engine with shared in-memory SQLite."""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def file_engine(tmp_path: Path, test_settings):
    """
    File-backed SQLite engine with a real connection pool.

    Needed whenever several threads must hold their own connections.
    """
    engine = create_db_engine(
        f"sqlite:///{tmp_path / 'ledger.db'}",
        lock_timeout_ms=30000,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


# =============================================================================
# CONTEXT / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def app_context(test_settings, test_engine, fast_hasher) -> AppContext:
    """AppContext bound to the in-memory test database."""
    return AppContext(settings=test_settings, engine=test_engine, password_hasher=fast_hasher)


@pytest.fixture
def file_context(test_settings, file_engine, fast_hasher) -> AppContext:
    """AppContext bound to the file-backed test database."""
    return AppContext(settings=test_settings, engine=file_engine, password_hasher=fast_hasher)


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def account_service(app_context, test_session) -> AccountService:
    """Provide AccountService reading through the test session."""
    return app_context.account_service(test_session)


@pytest.fixture
def transfer_engine(app_context) -> TransferEngine:
    """Provide TransferEngine on the in-memory database."""
    return app_context.transfer_engine()


# =============================================================================
# FACTORIES
# =============================================================================


def _make_account_factory(context: AppContext) -> Callable[..., Account]:
    def _create_account(
        first_name: str = "Ada",
        last_name: str = "Lovelace",
        balance: Decimal = Decimal("0"),
        password: str = DEFAULT_PASSWORD,
    ) -> Account:
        session = context.new_session()
        try:
            return context.account_service(session).create_account(
                first_name=first_name,
                last_name=last_name,
                password=password,
                opening_balance=to_minor_units(balance),
            )
        finally:
            session.close()

    return _create_account


@pytest.fixture
def account_factory(app_context) -> Callable[..., Account]:
    """Factory for creating accounts in the in-memory database."""
    return _make_account_factory(app_context)


@pytest.fixture
def file_account_factory(file_context) -> Callable[..., Account]:
    """Factory for creating accounts in the file-backed database."""
    return _make_account_factory(file_context)


def _make_balance_reader(context: AppContext) -> Callable[[str], Optional[int]]:
    def _balance_of(iban: str) -> Optional[int]:
        session = context.new_session()
        try:
            account = SqlAlchemyAccountRepository(session).get_by_iban(iban)
            return account.balance if account else None
        finally:
            session.close()

    return _balance_of


@pytest.fixture
def balance_of(app_context) -> Callable[[str], Optional[int]]:
    """Read a committed balance (minor units) through a fresh session."""
    return _make_balance_reader(app_context)


@pytest.fixture
def file_balance_of(file_context) -> Callable[[str], Optional[int]]:
    """Read a committed balance from the file-backed database."""
    return _make_balance_reader(file_context)


# =============================================================================
# API TEST CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client bound to the test database."""
    app = create_app(app_context)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registered_account(client: TestClient) -> Callable[..., dict]:
    """
    Create an account over the API and log it in.

    Returns the account JSON with an extra "headers" key holding the
    Authorization header for that account.
    """

    def _register(
        first_name: str = "Ada",
        last_name: str = "Lovelace",
        opening_balance: str = "0",
        password: str = DEFAULT_PASSWORD,
    ) -> dict:
        response = client.post("/accounts", json={
            "firstName": first_name,
            "lastName": last_name,
            "password": password,
            "openingBalance": opening_balance,
        })
        assert response.status_code == 201, response.text
        account = response.json()

        login = client.post("/login", json={"iban": account["iban"], "password": password})
        assert login.status_code == 200, login.text
        account["headers"] = {"Authorization": f"Bearer {login.json()['token']}"}
        return account

    return _register


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def cents(amount: str) -> int:
    """Shorthand for converting a decimal string to minor units."""
    return to_minor_units(Decimal(amount))
