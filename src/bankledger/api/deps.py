"""Dependency injection for FastAPI."""

from typing import Generator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bankledger.app_context import AppContext
from bankledger.core.exceptions import UnauthorizedError
from bankledger.domain.models import AuthenticatedAccount
from bankledger.services import AccountService, TransferEngine

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext built at startup."""
    return request.app.state.context


def get_db(context: AppContext = Depends(get_app_context)) -> Generator[Session, None, None]:
    """Provide a request-scoped database session."""
    db = context.new_session()
    try:
        yield db
    finally:
        db.close()


def get_account_service(
    context: AppContext = Depends(get_app_context),
    db: Session = Depends(get_db),
) -> AccountService:
    """Provide AccountService instance."""
    return context.account_service(db)


def get_transfer_engine(context: AppContext = Depends(get_app_context)) -> TransferEngine:
    """Provide TransferEngine instance."""
    return context.transfer_engine()


def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    context: AppContext = Depends(get_app_context),
) -> AuthenticatedAccount:
    """Resolve the bearer token to the calling account."""
    if credentials is None:
        raise UnauthorizedError(
            "Authorization header must be in the format 'Bearer {token}'"
        )
    return context.token_service.verify(credentials.credentials)
