"""Transfer endpoint."""

from fastapi import APIRouter, Depends

from bankledger.api.deps import get_current_account, get_transfer_engine
from bankledger.api.schemas import ErrorResponse, TransferRequest, TransferResponse
from bankledger.core.money import to_minor_units
from bankledger.domain.models import AuthenticatedAccount
from bankledger.services import TransferEngine

router = APIRouter(tags=["transfers"])


@router.post(
    "/transfer",
    response_model=TransferResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
def transfer(
    data: TransferRequest,
    caller: AuthenticatedAccount = Depends(get_current_account),
    engine: TransferEngine = Depends(get_transfer_engine),
):
    """Transfer funds from the authenticated account to another IBAN."""
    engine.transfer(
        source_iban=caller.iban,
        dest_iban=data.to_account_iban,
        amount=to_minor_units(data.amount),
    )
    return TransferResponse()
