# brightpath/models/entries.py
"""
Database models for the wellness entries.

All entries are append-only: the application inserts them and never updates
or deletes them. The integer primary key doubles as the ordering tie-breaker
for rows created within the same clock tick.
"""
from tortoise import fields, models


class Mood(models.Model):
    id = fields.IntField(pk=True)
    user_email = fields.CharField(max_length=256, null=True, index=True)  # Owner identity
    mood = fields.CharField(max_length=256)  # Free-text label ("calm", "anxious", ...)
    stress_level = fields.IntField(null=True)  # Optional 0..10
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "moods"


class Journal(models.Model):
    id = fields.IntField(pk=True)
    user_email = fields.CharField(max_length=256, index=True)
    content = fields.TextField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "journals"


class Confession(models.Model):
    """
    Anonymous message.

    There is intentionally no owner column: nothing that identifies the
    sender can be stored, even when the request carried a session.
    """
    id = fields.IntField(pk=True)
    message = fields.TextField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "confessions"


class Feedback(models.Model):
    id = fields.IntField(pk=True)
    user_email = fields.CharField(max_length=256, null=True)  # Absent for anonymous feedback
    message = fields.TextField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "feedbacks"
