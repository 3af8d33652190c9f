"""Login endpoint."""

from fastapi import APIRouter, Depends

from bankledger.api.deps import get_account_service
from bankledger.api.schemas import ErrorResponse, LoginRequest, LoginResponse
from bankledger.services import AccountService

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    data: LoginRequest,
    service: AccountService = Depends(get_account_service),
):
    """Exchange IBAN and password for a bearer token."""
    token = service.login(data.iban, data.password)
    return LoginResponse(iban=data.iban, token=token)
