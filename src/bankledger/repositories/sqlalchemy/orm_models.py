"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    Integer,
    String,
)

from bankledger.core.timezone import now_utc
from bankledger.repositories.sqlalchemy.database import Base


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),
        # Ids, and the IBANs derived from them, are never reused after a delete
        {"sqlite_autoincrement": True},
    )

    account_id = Column(Integer, primary_key=True, autoincrement=True)
    # Assigned from account_id right after insert, inside the same transaction
    iban = Column(String(34), unique=True, nullable=True, index=True)
    first_name = Column(String(70), nullable=False)
    last_name = Column(String(70), nullable=False)
    password_hash = Column(String(255), nullable=False)
    balance = Column(BigInteger, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
