"""Transfer engine: atomic balance movement between two accounts."""

import logging

from bankledger.core.exceptions import (
    AccountNotFoundError,
    BalanceLimitExceededError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTransferError,
    LockTimeoutError,
    StoreUnavailableError,
)
from bankledger.core.money import MAX_MINOR_UNITS, format_minor_units
from bankledger.domain.models import TransferIntent
from bankledger.repositories.protocols import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class TransferEngine:
    """
    Moves funds between two accounts inside one unit of work.

    Both rows are locked in canonical IBAN order before anything is written,
    so transfers in opposite directions over the same pair queue on the first
    lock instead of deadlocking. Any failure rolls the whole unit of work
    back; callers see either both balances changed or neither. Nothing is
    retried here: LockTimeoutError and StoreUnavailableError are retryable by
    the caller.
    """

    def __init__(self, unit_of_work: UnitOfWorkFactory):
        self._unit_of_work = unit_of_work

    def transfer(self, source_iban: str, dest_iban: str, amount: int) -> None:
        """
        Move ``amount`` minor units from ``source_iban`` to ``dest_iban``.

        Raises:
            InvalidAmountError: amount is not a positive integer
            InvalidTransferError: source and destination are the same account
            AccountNotFoundError: either IBAN does not resolve
            InsufficientFundsError: source balance is below amount
            BalanceLimitExceededError: destination balance would overflow
            LockTimeoutError: a row lock was not granted in time
            StoreUnavailableError: the store failed
        """
        intent = TransferIntent(source_iban=source_iban, dest_iban=dest_iban, amount=amount)
        self._validate(intent)

        try:
            with self._unit_of_work() as uow:
                balances: dict[str, int] = {}
                for iban in intent.lock_order():
                    balances[iban] = uow.accounts.lock_for_update(iban)

                source_balance = balances[intent.source_iban]
                dest_balance = balances[intent.dest_iban]
                if source_balance < intent.amount:
                    raise InsufficientFundsError(
                        requested=format_minor_units(intent.amount),
                        available=format_minor_units(source_balance),
                    )
                if dest_balance > MAX_MINOR_UNITS - intent.amount:
                    raise BalanceLimitExceededError(intent.dest_iban)

                uow.accounts.set_balance(intent.source_iban, source_balance - intent.amount)
                uow.accounts.set_balance(intent.dest_iban, dest_balance + intent.amount)
        except (AccountNotFoundError, InsufficientFundsError, BalanceLimitExceededError) as exc:
            logger.info(
                "Transfer %s -> %s of %s rejected: %s",
                intent.source_iban,
                intent.dest_iban,
                format_minor_units(intent.amount),
                exc.code,
            )
            raise
        except (LockTimeoutError, StoreUnavailableError) as exc:
            logger.warning(
                "Transfer %s -> %s of %s aborted: %s",
                intent.source_iban,
                intent.dest_iban,
                format_minor_units(intent.amount),
                exc.code,
            )
            raise

        logger.debug(
            "Transferred %s from %s to %s",
            format_minor_units(intent.amount),
            intent.source_iban,
            intent.dest_iban,
        )

    @staticmethod
    def _validate(intent: TransferIntent) -> None:
        amount = intent.amount
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidAmountError(str(amount))
        if amount <= 0 or amount > MAX_MINOR_UNITS:
            raise InvalidAmountError(str(amount))
        if intent.source_iban == intent.dest_iban:
            raise InvalidTransferError(intent.source_iban)
