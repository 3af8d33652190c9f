"""Transfer intent and authenticated identity values."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransferIntent:
    """
    A single requested balance movement.

    Exists only for the duration of one transfer. The source IBAN always comes
    from the authenticated caller, never from the request body.
    """

    source_iban: str
    dest_iban: str
    amount: int  # minor units

    def lock_order(self) -> tuple[str, str]:
        """Both IBANs in canonical lock-acquisition order."""
        return tuple(sorted((self.source_iban, self.dest_iban)))


@dataclass(frozen=True)
class AuthenticatedAccount:
    """Identity resolved from a verified bearer token."""

    account_id: int
    iban: str
