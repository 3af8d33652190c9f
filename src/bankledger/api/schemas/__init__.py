"""Pydantic schemas for API request/response."""

from bankledger.api.schemas.common import CamelModel, ErrorResponse
from bankledger.api.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountDeletedResponse,
)
from bankledger.api.schemas.auth import LoginRequest, LoginResponse
from bankledger.api.schemas.transfer import TransferRequest, TransferResponse

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "AccountCreate",
    "AccountResponse",
    "AccountDeletedResponse",
    "LoginRequest",
    "LoginResponse",
    "TransferRequest",
    "TransferResponse",
]
