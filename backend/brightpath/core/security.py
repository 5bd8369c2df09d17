# brightpath/core/security.py
"""
Security module for authentication.
Handles password hashing, session id generation and the signed session cookie.
"""
import datetime as dt
import hashlib
import logging
import secrets

import jwt  # PyJWT
from passlib.context import CryptContext

from brightpath.config import settings

logger = logging.getLogger("uvicorn.error")

# Password hashing context
# Argon2 is a salted, memory-hard key derivation function
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

JWT_ALG = "HS256"  # Session cookie signing algorithm (HMAC SHA-256)

if settings.env != "dev" and settings.session_secret == "brightpath-dev-secret":
    logger.warning("[security] SESSION_SECRET not set outside dev; session cookies use the default secret")

_dummy_hash: str | None = None


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Never store plain text passwords. Always use this function before saving.
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a stored Argon2 hash.

    Returns False for malformed hashes instead of raising.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def burn_password_check(plain: str) -> None:
    """
    Run one verification against a throwaway hash.

    Used when the identity is unknown so a failed login costs the same time
    whether or not the account exists.
    """
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = pwd_context.hash(secrets.token_urlsafe(16))
    pwd_context.verify(plain, _dummy_hash)


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def hash_session_id(session_id: str) -> str:
    """sha256 of the raw session id; only the hash is stored server-side."""
    return hashlib.sha256(session_id.encode("utf-8")).hexdigest()


def create_session_token(session_id: str, ttl_seconds: int | None = None) -> str:
    """
    Wrap a session id into a signed cookie value.

    Payload:
        - sid: raw session id (looked up by its hash)
        - iat: issued at
        - exp: issued at + ttl_seconds (SESSION_TTL_HOURS by default)
    """
    if ttl_seconds is None:
        ttl_seconds = settings.session_ttl_seconds
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sid": session_id,
        "iat": now,
        "exp": now + dt.timedelta(seconds=ttl_seconds),
    }
    return jwt.encode(payload, settings.session_secret, algorithm=JWT_ALG)


def decode_session_token(token: str) -> str:
    """
    Validate a session cookie and return the session id it carries.

    Raises:
        jwt.ExpiredSignatureError: If the cookie has expired
        jwt.InvalidTokenError: If the cookie is malformed or forged
    """
    payload = jwt.decode(token, settings.session_secret, algorithms=[JWT_ALG])
    sid = payload.get("sid")
    if not sid:
        raise jwt.InvalidTokenError("missing sid")
    return sid
