"""Pydantic schemas for account endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from bankledger.api.schemas.common import CamelModel
from bankledger.core.money import from_minor_units
from bankledger.domain.models import Account


class AccountCreate(CamelModel):
    """Request schema for creating an account."""

    first_name: str = Field(..., min_length=1, max_length=70, description="Owner first name")
    last_name: str = Field(..., min_length=1, max_length=70, description="Owner last name")
    password: str = Field(..., min_length=1, max_length=128, description="Login password")
    opening_balance: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Starting balance in major units (at most 2 decimal places)",
    )


class AccountResponse(CamelModel):
    """Response schema for a single account. Never carries the password hash."""

    id: int
    first_name: str
    last_name: str
    iban: str
    balance: Decimal
    created_at: datetime

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.account_id,
            first_name=account.first_name,
            last_name=account.last_name,
            iban=account.iban,
            balance=from_minor_units(account.balance),
            created_at=account.created_at,
        )


class AccountDeletedResponse(CamelModel):
    """Response schema for a deleted account."""

    deleted: int
