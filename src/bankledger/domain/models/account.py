"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Account:
    """
    Bank account.

    The IBAN is the external handle used for login and transfers; account_id
    is the internal store-assigned key. Balance is held in minor units and is
    never negative once a unit of work has committed.
    """

    account_id: Optional[int]
    iban: Optional[str]
    first_name: str
    last_name: str
    password_hash: str
    balance: int = 0
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if self.balance < 0:
            raise ValueError(f"Account balance cannot be negative: {self.balance}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
