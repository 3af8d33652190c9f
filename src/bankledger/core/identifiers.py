"""Routing identifier (IBAN) generation.

An IBAN is derived from the store-assigned account id, so two accounts can
never share one. Check digits follow ISO 13616 (mod 97).
"""

ACCOUNT_NUMBER_DIGITS = 10


def _to_digits(value: str) -> str:
    """Replace letters with their ISO 13616 numeric value (A=10 ... Z=35)."""
    return "".join(str(int(ch, 36)) for ch in value.upper())


def iban_check_digits(country_code: str, bban: str) -> str:
    """Compute the two check digits for a country code and BBAN."""
    remainder = int(_to_digits(bban + country_code + "00")) % 97
    return f"{98 - remainder:02d}"


def format_iban(account_id: int, country_code: str, bank_code: str) -> str:
    """
    Build the IBAN for an account id.

    Example: account 42 with country NL and bank GOBK gives
    'NL' + check digits + 'GOBK' + '0000000042'.
    """
    if account_id < 0 or len(str(account_id)) > ACCOUNT_NUMBER_DIGITS:
        raise ValueError(f"Account id out of range for IBAN: {account_id}")
    bban = f"{bank_code.upper()}{account_id:0{ACCOUNT_NUMBER_DIGITS}d}"
    country = country_code.upper()
    return f"{country}{iban_check_digits(country, bban)}{bban}"
