# brightpath/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates the default admin account on first startup.
"""
import os
import logging
from brightpath.models.user import User
from brightpath.core.security import hash_password

logger = logging.getLogger("uvicorn.error")


async def ensure_default_admin() -> None:
    """
    If no admin exists in the database, create a default admin based on environment variables.
    Only takes effect under the following conditions:
      - Currently no user with role="admin"
      - And ADMIN_PASSWORD is set (to avoid using default weak password)
    Environment variables:
      ADMIN_EMAIL    (default: "admin@example.com")
      ADMIN_NAME     (default: "Administrator")
      ADMIN_PASSWORD (required, otherwise won't create)
    Signup can never produce an admin, so this is the only way to get the first one.
    """
    if await User.filter(role="admin").exists():
        return

    admin_password = os.getenv("ADMIN_PASSWORD")
    if not admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    admin_email = os.getenv("ADMIN_EMAIL", "admin@example.com")
    existing = await User.get_or_none(email=admin_email)
    if existing:
        # Existing accounts are never promoted
        logger.warning("[bootstrap] ADMIN_EMAIL=%s already belongs to a non-admin account -> skip.", admin_email)
        return

    u = await User.create(
        email=admin_email,
        name=os.getenv("ADMIN_NAME", "Administrator"),
        password_hash=hash_password(admin_password),
        role="admin",
    )
    logger.warning("[bootstrap] Created default admin -> email=%s id=%s", u.email, u.id)
