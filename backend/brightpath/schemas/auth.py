# brightpath/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Fields are optional so missing values reach the service layer, which answers
with a ValidationError instead of a framework 422.
"""
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field

# Older clients post the identity as "username" or "identity"
_IDENTITY = AliasChoices("email", "username", "identity")


class LoginIn(BaseModel):
    """
    Request model for login.
    Accepted from an HTML form or a JSON body.
    """
    email: Optional[str] = Field(default=None, validation_alias=_IDENTITY)  # Login identity
    password: Optional[str] = None  # Plain text, verified against the stored hash


class SignupIn(LoginIn):
    """
    Request model for signup. Role is never accepted from the client.
    """
    name: Optional[str] = None  # Optional display name

