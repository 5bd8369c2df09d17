# brightpath/models/user.py
"""
Database model for users.
Represents an account: login identity, credentials and role.
"""
import uuid
from tortoise import fields, models

ROLES = ("user", "student", "admin")


class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as an Argon2 hash (never plain text)
    - Email is the login identity; the unique index is the authoritative
      duplicate check, a lookup before insert only produces the friendly message
    - Role determines access level; only "admin" unlocks the admin views
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    email = fields.CharField(max_length=256, unique=True, index=True)  # Login identity
    name = fields.CharField(max_length=128, null=True)  # Optional display name
    password_hash = fields.CharField(max_length=255)
    role = fields.CharField(max_length=16, default="user")  # "user", "student" or "admin"
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"
