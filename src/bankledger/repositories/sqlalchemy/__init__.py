"""SQLAlchemy repository implementations."""

from bankledger.repositories.sqlalchemy.database import (
    BEGIN_IMMEDIATE,
    create_db_engine,
    get_engine,
    Base,
)
from bankledger.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from bankledger.repositories.sqlalchemy.unit_of_work import (
    SqlAlchemyUnitOfWork,
    translate_db_error,
)

__all__ = [
    "BEGIN_IMMEDIATE",
    "create_db_engine",
    "get_engine",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyUnitOfWork",
    "translate_db_error",
]
