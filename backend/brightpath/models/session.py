# brightpath/models/session.py
import uuid
from tortoise import fields, models


class Session(models.Model):
    """
    Server-side login session.
    - token_hash: sha256(raw session id), unique (raw id only lives in the signed cookie)
    - user_email / role: snapshot of the user at login time
    - expires_at: login time + SESSION_TTL_HOURS
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    token_hash = fields.CharField(max_length=64, unique=True, index=True)
    user_email = fields.CharField(max_length=256, index=True)
    role = fields.CharField(max_length=16, default="user")
    created_at = fields.DatetimeField(auto_now_add=True)
    expires_at = fields.DatetimeField()

    class Meta:
        table = "sessions"
