"""Password hashing and JWT helpers"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from ..config import settings
from ..errors import AuthenticationError


def get_password_hash(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password with bcrypt

    bcrypt ignores everything past 72 bytes, so callers validate the
    length before hashing instead of relying on silent truncation.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def _create_token(data: Dict[str, Any], token_type: str, expires_delta: timedelta) -> str:
    to_encode = data.copy()
    to_encode.update({
        "exp": datetime.now(timezone.utc) + expires_delta,
        "type": token_type,
    })
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    return _create_token(
        data,
        "access",
        expires_delta or timedelta(minutes=settings.JWT_EXPIRY_MINUTES)
    )


def create_refresh_token(data: Dict[str, Any]) -> str:
    return _create_token(data, "refresh", timedelta(days=settings.JWT_REFRESH_EXPIRY_DAYS))


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify a JWT

    Raises:
        AuthenticationError: If the signature is invalid or the token expired
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise AuthenticationError("Could not validate credentials")


def verify_token_type(payload: Dict[str, Any], expected: str) -> None:
    if payload.get("type") != expected:
        raise AuthenticationError("Invalid token type")
