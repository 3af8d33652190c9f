"""Pydantic schemas for transfers."""

from decimal import Decimal

from pydantic import Field

from bankledger.api.schemas.common import CamelModel


class TransferRequest(CamelModel):
    """
    Request schema for a transfer from the authenticated account.

    The amount is validated by the transfer engine, not here, so a zero or
    negative amount is reported as INVALID_AMOUNT rather than a schema error.
    """

    to_account_iban: str = Field(..., min_length=1, max_length=34)
    amount: Decimal = Field(..., description="Amount in major units (at most 2 decimal places)")


class TransferResponse(CamelModel):
    """Response schema for a committed transfer."""

    status: str = "success"
