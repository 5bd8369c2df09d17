# brightpath/schemas/entries.py
"""
Pydantic schemas for wellness entry submissions.
"""
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator


class MoodIn(BaseModel):
    mood: Optional[str] = None
    stressLevel: Optional[int] = Field(
        default=None, ge=0, le=10, validation_alias=AliasChoices("stressLevel", "stress_level")
    )

    @field_validator("stressLevel", mode="before")
    @classmethod
    def _blank_is_absent(cls, v):
        # HTML forms send "" for an untouched number input
        if isinstance(v, str) and not v.strip():
            return None
        return v


class JournalIn(BaseModel):
    content: Optional[str] = None


class MessageIn(BaseModel):
    """Body for confessions and feedback."""
    message: Optional[str] = None
