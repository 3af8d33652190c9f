"""Password hashing and bearer token handling."""

import hashlib
import hmac
import secrets
from datetime import timedelta

import jwt

from bankledger.core.exceptions import UnauthorizedError
from bankledger.core.timezone import now_utc
from bankledger.domain.models import Account, AuthenticatedAccount

TOKEN_ALGORITHM = "HS256"


class PasswordHasher:
    """Salted scrypt password hashing. Hashes are stored as ``scrypt$<salt>$<hex>``."""

    SCHEME = "scrypt"

    def __init__(self, n: int = 16384, r: int = 8, p: int = 1):
        self._n = n
        self._r = r
        self._p = p

    def _derive(self, password: str, salt: str) -> str:
        return hashlib.scrypt(
            password.encode(),
            salt=salt.encode(),
            n=self._n,
            r=self._r,
            p=self._p,
        ).hex()

    def hash(self, password: str) -> str:
        salt = secrets.token_hex(16)
        return f"{self.SCHEME}${salt}${self._derive(password, salt)}"

    def verify(self, password: str, stored_hash: str) -> bool:
        try:
            scheme, salt, expected = stored_hash.split("$")
        except ValueError:
            return False
        if scheme != self.SCHEME:
            return False
        return hmac.compare_digest(self._derive(password, salt), expected)


class TokenService:
    """
    Issues and verifies HS256 bearer tokens.

    The signing key is handed in once at construction and never re-read, so a
    running process always signs and verifies with the same key.
    """

    def __init__(self, secret: str, issuer: str = "gobank", ttl_minutes: int = 60):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._issuer = issuer
        self._ttl = timedelta(minutes=ttl_minutes)

    def issue(self, account: Account) -> str:
        """Create a token identifying the account by id and IBAN."""
        issued_at = now_utc()
        payload = {
            "sub": str(account.account_id),
            "iban": account.iban,
            "iss": self._issuer,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> AuthenticatedAccount:
        """Resolve a token to the account it was issued for."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                issuer=self._issuer,
                options={"require": ["sub", "iss", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("Token expired")
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid token")

        iban = payload.get("iban")
        try:
            account_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise UnauthorizedError("Invalid token")
        if not iban or not isinstance(iban, str):
            raise UnauthorizedError("Invalid token")
        return AuthenticatedAccount(account_id=account_id, iban=iban)
