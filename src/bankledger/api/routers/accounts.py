"""Account endpoints."""

from fastapi import APIRouter, Depends

from bankledger.api.deps import get_account_service, get_current_account
from bankledger.api.schemas import (
    AccountCreate,
    AccountResponse,
    AccountDeletedResponse,
    ErrorResponse,
)
from bankledger.core.money import to_minor_units
from bankledger.domain.models import AuthenticatedAccount
from bankledger.services import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    data: AccountCreate,
    service: AccountService = Depends(get_account_service),
):
    """Create a new account. The IBAN is assigned by the server."""
    account = service.create_account(
        first_name=data.first_name,
        last_name=data.last_name,
        password=data.password,
        opening_balance=to_minor_units(data.opening_balance),
    )
    return AccountResponse.from_domain(account)


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    """Get a single account by ID."""
    return AccountResponse.from_domain(service.get_account(account_id))


@router.delete(
    "/{account_id}",
    response_model=AccountDeletedResponse,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def delete_account(
    account_id: int,
    caller: AuthenticatedAccount = Depends(get_current_account),
    service: AccountService = Depends(get_account_service),
):
    """Delete the caller's own account."""
    service.delete_account(account_id, caller)
    return AccountDeletedResponse(deleted=account_id)
