# brightpath/services/accounts.py
"""
Account and session operations.

Signup, credential checks and the server-side session lifecycle. Route
handlers call these and let the raised errors reach the app's exception
handlers.
"""
import datetime as dt
import logging

from tortoise.exceptions import IntegrityError

from brightpath.config import settings
from brightpath.core.errors import AuthenticationError, ConflictError, ValidationError
from brightpath.core.security import (
    burn_password_check,
    hash_password,
    hash_session_id,
    new_session_id,
    verify_password,
)
from brightpath.models.session import Session
from brightpath.models.user import User

logger = logging.getLogger("uvicorn.error")


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def user_to_dict(u: User) -> dict:
    """Public view of a user; never includes the password hash."""
    return {
        "id": str(u.id),
        "email": u.email,
        "name": u.name,
        "role": u.role,
        "createdAt": u.created_at.isoformat() if u.created_at else None,
    }


def _clean(value: str | None) -> str:
    return (value or "").strip()


async def signup(email: str | None, password: str | None, name: str | None = None) -> User:
    """
    Create a new account with the least-privileged role.

    Raises:
        ValidationError: email or password missing
        ConflictError: an account with this email already exists
    """
    email = _clean(email)
    if not email or not password:
        raise ValidationError("Missing fields")
    if await User.filter(email=email).exists():
        raise ConflictError()
    try:
        u = await User.create(
            email=email,
            name=_clean(name) or None,
            password_hash=hash_password(password),
            role=settings.default_role,
        )
    except IntegrityError:
        # Lost a race with a concurrent signup; the unique index decides
        raise ConflictError()
    logger.info("[accounts] signup email=%s role=%s", u.email, u.role)
    return u


async def authenticate(email: str | None, password: str | None) -> User:
    """
    Check credentials and return the matching user.

    Raises:
        ValidationError: email or password missing
        AuthenticationError: unknown email or wrong password
    """
    email = _clean(email)
    if not email or not password:
        raise ValidationError("Missing fields")
    user = await User.get_or_none(email=email)
    if user is None:
        burn_password_check(password)
        logger.warning("[accounts] login failed email=%s", email)
        raise AuthenticationError()
    if not verify_password(password, user.password_hash):
        logger.warning("[accounts] login failed email=%s", email)
        raise AuthenticationError()
    return user


async def current_role(email: str) -> str | None:
    user = await User.get_or_none(email=email)
    return user.role if user else None


async def open_session(user: User, ttl_seconds: int | None = None) -> str:
    """
    Start a session for ``user`` and return the raw session id.

    The role is copied into the session; it is not refreshed until the next login.
    Expired sessions of every user are purged first.
    """
    await Session.filter(expires_at__lte=utc_now()).delete()
    ttl = ttl_seconds if ttl_seconds is not None else settings.session_ttl_seconds
    sid = new_session_id()
    await Session.create(
        token_hash=hash_session_id(sid),
        user_email=user.email,
        role=user.role,
        expires_at=utc_now() + dt.timedelta(seconds=ttl),
    )
    return sid


async def lookup_session(sid: str) -> Session | None:
    """Return the live session for ``sid``; expired rows are deleted on sight."""
    token_hash = hash_session_id(sid)
    await Session.filter(token_hash=token_hash, expires_at__lte=utc_now()).delete()
    return await Session.get_or_none(token_hash=token_hash)


async def close_session(sid: str) -> None:
    """Destroy a session. Closing an unknown session is not an error."""
    await Session.filter(token_hash=hash_session_id(sid)).delete()
