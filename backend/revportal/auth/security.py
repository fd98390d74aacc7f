"""Password hashing and JWT access/refresh tokens.

Passwords use bcrypt directly; tokens are signed with python-jose using the
secret and algorithm from settings.
"""

import uuid
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from revportal.config import settings

ACCESS = "access"
REFRESH = "refresh"


class InvalidTokenError(Exception):
    """Token is malformed, expired, of the wrong type, or lacks a valid subject."""


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------


def hash_password(password: str) -> str:
    """Hash a plain-text password with a fresh bcrypt salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if ``plain_password`` matches the bcrypt hash."""
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


def _encode(data: dict, token_type: str, lifetime: timedelta) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    to_encode.update({"exp": now + lifetime, "iat": now, "type": token_type})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Create a short-lived access token. ``data`` must include ``sub``."""
    return _encode(data, ACCESS, expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes))


def create_refresh_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Create a long-lived refresh token. ``data`` must include ``sub``."""
    return _encode(data, REFRESH, expires_delta or timedelta(days=settings.jwt_refresh_token_expire_days))


def decode_token(token: str) -> dict:
    """Decode and verify a JWT.

    Raises:
        jose.JWTError: If the token is invalid, expired, or malformed.
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


def token_subject(token: str, expected_type: str) -> uuid.UUID:
    """Return the user id carried by a token of ``expected_type``.

    Raises:
        InvalidTokenError: With a message suitable for a 401 response.
    """
    try:
        payload = decode_token(token)
    except JWTError:
        raise InvalidTokenError("Could not validate credentials") from None

    if payload.get("type") != expected_type:
        raise InvalidTokenError("Invalid token type")

    sub = payload.get("sub")
    try:
        return uuid.UUID(sub)
    except (TypeError, ValueError):
        raise InvalidTokenError("Invalid token payload") from None


def create_token_pair(user_id: str) -> dict[str, str]:
    """Create both tokens for a user id (UUID as string)."""
    payload = {"sub": user_id}
    return {
        "access_token": create_access_token(payload),
        "refresh_token": create_refresh_token(payload),
        "token_type": "bearer",
    }
