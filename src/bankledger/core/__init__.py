"""Core utilities and shared functionality."""

from bankledger.core.timezone import now_utc, to_utc, UTC
from bankledger.core.money import (
    MAX_MINOR_UNITS,
    to_minor_units,
    from_minor_units,
    format_minor_units,
)
from bankledger.core.identifiers import format_iban, iban_check_digits
from bankledger.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AccountNotFoundError,
    InvalidAmountError,
    InvalidTransferError,
    InsufficientFundsError,
    BalanceLimitExceededError,
    UnauthorizedError,
    ForbiddenError,
    LockTimeoutError,
    StoreUnavailableError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "UTC",
    "MAX_MINOR_UNITS",
    "to_minor_units",
    "from_minor_units",
    "format_minor_units",
    "format_iban",
    "iban_check_digits",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AccountNotFoundError",
    "InvalidAmountError",
    "InvalidTransferError",
    "InsufficientFundsError",
    "BalanceLimitExceededError",
    "UnauthorizedError",
    "ForbiddenError",
    "LockTimeoutError",
    "StoreUnavailableError",
]
