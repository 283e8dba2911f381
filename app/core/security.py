"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from app.core.config import Settings

ADMIN_ROLE = "admin"

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


class TokenError(Exception):
    """Raised when a bearer token cannot be accepted."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidTokenError(TokenError):
    """Bad signature, malformed token, or missing required claims."""


class ExpiredTokenError(TokenError):
    """Signature is fine but the exp claim is in the past."""


def hash_password(plain_password: str, rounds: int = 10) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    name: str,
    settings: "Settings",
    role: str | None = None,
) -> str:
    """Create a JWT carrying sub/id, name, optional role, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "id": user_id,
        "name": name,
        "iat": now,
        "exp": expire,
    }
    if role is not None:
        payload["role"] = role
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> dict[str, Any]:
    """
    Decode and validate a JWT; return its claims.
    Raises ExpiredTokenError or InvalidTokenError.
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError("Token expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token") from e


def subject_id(claims: dict[str, Any]) -> int:
    """Return the integer user id from token claims. Raises InvalidTokenError."""
    try:
        return int(claims["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token payload") from e
