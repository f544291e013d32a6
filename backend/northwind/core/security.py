# backend/northwind/core/security.py

import base64
import hashlib
import hmac
import secrets
import uuid
from datetime import datetime, timedelta
from typing import Any, Optional

from jose import JWTError, jwt

from northwind.core.config import Settings, get_settings
from northwind.core.time_utils import utcnow

SALT_SIZE = 64
HASH_SIZE = 32


def hash_password(password: Optional[str]) -> tuple[bytes, bytes]:
    """
    Returns (salt, hash). The salt is the HMAC-SHA256 key.
    Blank passwords yield (b"", b""), which callers treat as "no password set".
    """
    if not password or not password.strip():
        return b"", b""

    salt = secrets.token_bytes(SALT_SIZE)
    return salt, _keyed_hash(password, salt)


def verify_password(password: Optional[str], salt: Optional[bytes], password_hash: Optional[bytes]) -> bool:
    if not password or not password.strip():
        return False
    if salt is None or password_hash is None:
        return False
    if len(salt) != SALT_SIZE or len(password_hash) != HASH_SIZE:
        return False

    return hmac.compare_digest(_keyed_hash(password, bytes(salt)), bytes(password_hash))


def _keyed_hash(password: str, salt: bytes) -> bytes:
    return hmac.new(salt, password.encode("utf-8"), hashlib.sha256).digest()


def access_token_lifetime(settings: Optional[Settings] = None) -> timedelta:
    settings = settings or get_settings()
    return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def create_access_token(
    subject: str,
    role: str,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> str:
    settings = settings or get_settings()
    issued_at = now or utcnow()
    to_encode: dict[str, Any] = {
        "sub": str(subject),
        "role": str(role),
        "iat": issued_at,
        "exp": issued_at + access_token_lifetime(settings),
        "aud": settings.JWT_AUDIENCE,
        "iss": settings.JWT_ISSUER,
        # two tokens minted in the same second must still differ
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str, settings: Optional[Settings] = None) -> dict[str, Any]:
    settings = settings or get_settings()
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError as e:
        raise ValueError("Invalid token") from e


def generate_refresh_token() -> str:
    """base64 of the SHA-256 digest of 64 random bytes."""
    digest = hashlib.sha256(secrets.token_bytes(64)).digest()
    return base64.b64encode(digest).decode("ascii")
