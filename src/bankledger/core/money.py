"""Conversion between API decimal amounts and stored minor units (cents).

Balances are integers everywhere below the API layer. Decimals only appear in
request and response bodies.
"""

from decimal import Decimal, DecimalException
from typing import Union

from bankledger.core.exceptions import InvalidAmountError

MINOR_UNITS_PER_MAJOR = 100
CENT = Decimal("0.01")

# Largest balance a BIGINT column can hold
MAX_MINOR_UNITS = 2**63 - 1

# Anything with more integer digits than this is over MAX_MINOR_UNITS already
_MAX_INTEGER_DIGITS = len(str(MAX_MINOR_UNITS // MINOR_UNITS_PER_MAJOR))


def to_minor_units(amount: Union[Decimal, int, str]) -> int:
    """
    Convert a major-unit amount to integer minor units.

    Raises InvalidAmountError when the value is not a finite number, carries
    more precision than one cent, or does not fit in a stored balance. Sign
    is preserved; callers decide whether zero or negative values are
    acceptable.
    """
    try:
        value = Decimal(str(amount))
    except (DecimalException, ValueError):
        raise InvalidAmountError(str(amount))
    if not value.is_finite() or value.adjusted() >= _MAX_INTEGER_DIGITS:
        raise InvalidAmountError(str(amount))

    try:
        scaled = value * MINOR_UNITS_PER_MAJOR
        is_whole = scaled == scaled.to_integral_value()
    except DecimalException:
        raise InvalidAmountError(str(amount))
    if not is_whole:
        raise InvalidAmountError(str(amount))

    minor = int(scaled)
    if abs(minor) > MAX_MINOR_UNITS:
        raise InvalidAmountError(str(amount))
    return minor


def from_minor_units(minor: int) -> Decimal:
    """Convert integer minor units to a two-place Decimal."""
    return (Decimal(minor) / MINOR_UNITS_PER_MAJOR).quantize(CENT)


def format_minor_units(minor: int) -> str:
    """Render minor units for messages, e.g. 12345 -> '123.45'."""
    return str(from_minor_units(minor))
