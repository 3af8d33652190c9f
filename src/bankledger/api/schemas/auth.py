"""Pydantic schemas for login."""

from pydantic import Field

from bankledger.api.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Request schema for logging in with IBAN and password."""

    iban: str = Field(..., min_length=1, max_length=34)
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(CamelModel):
    """Response schema carrying the bearer token."""

    iban: str
    token: str
