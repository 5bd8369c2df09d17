# brightpath/core/errors.py
"""
Application error taxonomy.

Services raise these; a single set of exception handlers registered in
``brightpath.main`` turns them into responses, so handlers never build
error responses themselves.
"""
from fastapi import status


class BrightPathError(Exception):
    """Base class carrying an error code, a user-facing message and an HTTP status."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "BAD_REQUEST"
    message: str = "Bad request"

    def __init__(self, message: str | None = None, code: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if code:
            self.code = code


class ValidationError(BrightPathError):
    """A required field is missing or blank."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Missing fields"


class AuthenticationError(BrightPathError):
    """Bad credentials. The message never says which field was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_INVALID_CREDENTIALS"
    message = "Incorrect email or password"


class AuthenticationRequired(BrightPathError):
    """No valid session on a route that needs one."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_REQUIRED"
    message = "Login required"


class AuthorizationError(BrightPathError):
    """Authenticated, but the session role is not allowed here."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN_ADMIN_ONLY"
    message = "Admin access required"


class ConflictError(BrightPathError):
    # Rejected signups are reported in a normal response, not as a 4xx
    status_code = status.HTTP_200_OK
    code = "USER_EXISTS"
    message = "User already exists"


class NotFoundError(BrightPathError):
    """The route exists but its collection is disabled."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Not found"
