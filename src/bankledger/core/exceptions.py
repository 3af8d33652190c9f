"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400
    retryable = False

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str, code: str = "NOT_FOUND"):
        super().__init__(f"{resource} not found: {identifier}", code=code)


class AccountNotFoundError(NotFoundError):
    """Raised when an account id or IBAN does not resolve."""

    def __init__(self, identifier: str):
        super().__init__("Account", identifier, code="ACCOUNT_NOT_FOUND")


class InvalidAmountError(AppError):
    """Raised when a transfer amount is not a positive number of cents."""

    def __init__(self, amount: str):
        super().__init__(
            f"Invalid amount: {amount} (must be positive with at most 2 decimal places)",
            code="INVALID_AMOUNT",
        )


class InvalidTransferError(AppError):
    """Raised when source and destination are the same account."""

    def __init__(self, iban: str):
        super().__init__(
            f"Cannot transfer from account {iban} to itself",
            code="INVALID_TRANSFER",
        )


class InsufficientFundsError(AppError):
    """Raised when the source balance does not cover the amount."""

    status_code = 409

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient funds: requested {requested}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )


class BalanceLimitExceededError(AppError):
    """Raised when a credit would push the destination past the largest storable balance."""

    status_code = 409

    def __init__(self, iban: str):
        super().__init__(
            f"Transfer would exceed the maximum balance of account {iban}",
            code="BALANCE_LIMIT_EXCEEDED",
        )


class UnauthorizedError(AppError):
    """Raised when credentials are missing, invalid or expired."""

    status_code = 401

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, code="UNAUTHORIZED")


class ForbiddenError(AppError):
    """Raised when an authenticated caller acts on another caller's account."""

    status_code = 403

    def __init__(self, message: str = "Operation not permitted for this account"):
        super().__init__(message, code="FORBIDDEN")


class LockTimeoutError(AppError):
    """Raised when a row lock could not be acquired in time."""

    status_code = 503
    retryable = True

    def __init__(self, message: str = "Account is busy, please retry"):
        super().__init__(message, code="LOCK_TIMEOUT")


class StoreUnavailableError(AppError):
    """Raised when the data store cannot be reached or fails."""

    status_code = 503
    retryable = True

    def __init__(self, message: str = "Service temporarily unavailable, please retry"):
        super().__init__(message, code="STORE_UNAVAILABLE")
