"""Password hashing and access tokens."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

from farmbooks.core.config import get_settings


def hash_password(password: str) -> str:
    """Hash a plain-text password with bcrypt."""
    settings = get_settings()
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=settings.bcrypt_rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(payload: Dict[str, Any]) -> str:
    """
    Sign a JWT for the given claims.

    Args:
        payload: Claims to embed (id, email, role)

    Returns:
        Encoded token string

    Raises:
        ValueError: If no signing secret is configured
    """
    settings = get_settings()
    if not settings.jwt_secret:
        raise ValueError("Invalid jwt key")

    expires_at = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expires_minutes)
    claims = {**payload, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify a JWT and return its claims.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, tampered with, or expired
        ValueError: If no signing secret is configured
    """
    settings = get_settings()
    if not settings.jwt_secret:
        raise ValueError("Invalid jwt key")
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
