"""Password hashing and JWT creation/verification for authentication."""

import base64
import hashlib
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from myflix.core.exceptions import (
    AuthenticationError,
    ConfigurationError,
    CredentialIntegrityError,
)
from myflix.schemas.auth import TokenClaims

# Bcrypt cost (rounds) used when nothing else is configured.
BCRYPT_ROUNDS = 12
# Verified against when the username is unknown, so both paths cost one bcrypt check.
DUMMY_PASSWORD = "myflix-no-such-user"


def _password_bytes(plain_password: str) -> bytes:
    # bcrypt ignores input past 72 bytes; a base64 SHA-256 digest is 44 bytes, so every byte counts.
    digest = hashlib.sha256(plain_password.encode("utf-8")).digest()
    return base64.b64encode(digest)


class PasswordHasher:
    """Salted one-way hashing with bcrypt. Holds no per-call state."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds
        self._dummy_hash = self.hash(DUMMY_PASSWORD)

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Every call draws a fresh salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        """
        Verify a plain password against a stored hash.

        Raises CredentialIntegrityError when the stored hash is not a bcrypt
        hash: that is corrupted data, not a wrong password.
        """
        try:
            return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
        except (ValueError, TypeError) as e:
            raise CredentialIntegrityError("Stored password hash is malformed") from e

    def verify_dummy(self, plain_password: str) -> bool:
        """Spend one bcrypt check on a throwaway hash; always False."""
        bcrypt.checkpw(_password_bytes(plain_password), self._dummy_hash.encode("utf-8"))
        return False


class TokenService:
    """Issues and verifies signed, time-bounded bearer tokens."""

    def __init__(self, secret: str | None, algorithm: str = "HS256", expire_minutes: int = 10080) -> None:
        if secret is None or not secret.strip():
            raise ConfigurationError("JWT_SECRET must be set to sign access tokens")
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Any) -> "TokenService":
        secret = settings.JWT_SECRET.get_secret_value() if settings.JWT_SECRET else None
        return cls(
            secret,
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(
        self,
        username: str,
        now: datetime | None = None,
        expires_in: timedelta | None = None,
    ) -> str:
        """Create a JWT access token with sub (username), iat and exp."""
        now = now or datetime.now(UTC)
        expire = now + (expires_in if expires_in is not None else timedelta(minutes=self.expire_minutes))
        payload: dict[str, Any] = {
            "sub": username,
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a JWT; return its claims.
        Raises AuthenticationError on a bad signature, corrupt structure, missing claims or expiry.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired") from e
        except jwt.PyJWTError as e:
            raise AuthenticationError("Invalid token") from e
        sub = payload.get("sub")
        if not isinstance(sub, str) or not sub:
            raise AuthenticationError("Invalid token payload")
        return TokenClaims(
            sub=sub,
            iat=datetime.fromtimestamp(payload["iat"], UTC),
            exp=datetime.fromtimestamp(payload["exp"], UTC),
        )
