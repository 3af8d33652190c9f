"""
Integration tests for TransferEngine on SQLite.

Tests cover:
- Balance movement and conservation against the real store
- InsufficientFunds / InvalidTransfer / AccountNotFound leave balances unchanged
- Transfers to a deleted account
- The end-to-end A=100, B=50 scenario
"""

import pytest

from bankledger.core.exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTransferError,
)
from bankledger.domain.models import AuthenticatedAccount
from bankledger.services import TransferEngine

from tests.conftest import cents


@pytest.fixture
def pair(account_factory):
    """Account A with 100.00 and account B with 50.00."""
    a = account_factory(first_name="Alice", balance="100")
    b = account_factory(first_name="Bob", balance="50")
    return a, b


class TestTransfer:
    """Tests for successful transfers."""

    def test_transfer_moves_funds(self, transfer_engine: TransferEngine, pair, balance_of):
        a, b = pair

        transfer_engine.transfer(a.iban, b.iban, cents("30"))

        assert balance_of(a.iban) == cents("70")
        assert balance_of(b.iban) == cents("80")

    def test_conservation_over_many_transfers(self, transfer_engine, pair, balance_of):
        a, b = pair
        total = balance_of(a.iban) + balance_of(b.iban)

        for amount in ("0.01", "12.34", "45.00", "0.99"):
            transfer_engine.transfer(a.iban, b.iban, cents(amount))
            transfer_engine.transfer(b.iban, a.iban, cents(amount) // 2 or 1)

        assert balance_of(a.iban) + balance_of(b.iban) == total

    def test_drain_to_zero(self, transfer_engine, pair, balance_of):
        a, b = pair

        transfer_engine.transfer(b.iban, a.iban, cents("50"))

        assert balance_of(b.iban) == 0
        assert balance_of(a.iban) == cents("150")


class TestTransferFailures:
    """Failed transfers change no balance anywhere."""

    def test_insufficient_funds(self, transfer_engine, pair, balance_of):
        a, b = pair

        with pytest.raises(InsufficientFundsError):
            transfer_engine.transfer(a.iban, b.iban, cents("100.01"))

        assert balance_of(a.iban) == cents("100")
        assert balance_of(b.iban) == cents("50")

    def test_self_transfer(self, transfer_engine, pair, balance_of):
        a, _ = pair

        with pytest.raises(InvalidTransferError):
            transfer_engine.transfer(a.iban, a.iban, cents("1"))

        assert balance_of(a.iban) == cents("100")

    def test_zero_amount(self, transfer_engine, pair, balance_of):
        a, b = pair

        with pytest.raises(InvalidAmountError):
            transfer_engine.transfer(a.iban, b.iban, 0)

        assert balance_of(a.iban) == cents("100")
        assert balance_of(b.iban) == cents("50")

    def test_unknown_destination(self, transfer_engine, pair, balance_of):
        a, b = pair

        with pytest.raises(AccountNotFoundError):
            transfer_engine.transfer(a.iban, "NL00GOBK9999999999", cents("10"))

        assert balance_of(a.iban) == cents("100")
        assert balance_of(b.iban) == cents("50")

    def test_unknown_source(self, transfer_engine, pair, balance_of):
        a, b = pair

        with pytest.raises(AccountNotFoundError):
            transfer_engine.transfer("NL00GOBK9999999999", b.iban, cents("10"))

        assert balance_of(b.iban) == cents("50")

    def test_destination_sorting_before_source_not_found(self, transfer_engine, account_factory, balance_of):
        """
        GIVEN a destination IBAN that sorts before the source and does not exist
        WHEN transferring
        THEN AccountNotFoundError is raised and the source is untouched
        """
        source = account_factory(balance="10")

        with pytest.raises(AccountNotFoundError):
            transfer_engine.transfer(source.iban, "AA00NONE0000000000", cents("1"))

        assert balance_of(source.iban) == cents("10")

    def test_deleted_destination(self, transfer_engine, account_service, pair, balance_of):
        a, b = pair
        account_service.delete_account(
            b.account_id, AuthenticatedAccount(account_id=b.account_id, iban=b.iban)
        )

        with pytest.raises(AccountNotFoundError):
            transfer_engine.transfer(a.iban, b.iban, cents("10"))

        assert balance_of(a.iban) == cents("100")


class TestEndToEndScenario:
    """A=100, B=50; A->B 30 succeeds; B->A 1000 fails."""

    def test_scenario(self, transfer_engine, pair, balance_of):
        a, b = pair

        transfer_engine.transfer(a.iban, b.iban, cents("30"))
        assert (balance_of(a.iban), balance_of(b.iban)) == (cents("70"), cents("80"))

        with pytest.raises(InsufficientFundsError):
            transfer_engine.transfer(b.iban, a.iban, cents("1000"))
        assert (balance_of(a.iban), balance_of(b.iban)) == (cents("70"), cents("80"))
