# brightpath/api/deps.py
import jwt
import pydantic
from fastapi import Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse

from brightpath.config import Settings, settings
from brightpath.core.errors import AuthenticationRequired, AuthorizationError, ValidationError
from brightpath.core.security import decode_session_token
from brightpath.models.session import Session
from brightpath.services import accounts


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with (tests build apps with overrides)."""
    return getattr(request.app.state, "settings", settings)


def wants_json(request: Request) -> bool:
    """
    True for API clients, False for browsers.

    A request is a JSON client when it sends a JSON body, or when its Accept
    header asks for JSON and not for HTML. Browsers get redirects and plain
    text; JSON clients get envelopes.
    """
    if request.headers.get("content-type", "").startswith("application/json"):
        return True
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept


async def read_payload(request: Request) -> dict:
    """
    Read the request body as a flat dict, from JSON or from an HTML form.
    """
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise ValidationError("Malformed JSON body")
        if not isinstance(data, dict):
            raise ValidationError("JSON body must be an object")
        return data
    form = await request.form()
    return {k: v for k, v in form.items()}


def parse_body(schema: type[pydantic.BaseModel], payload: dict):
    """Validate ``payload`` against ``schema``; type errors become a ValidationError (400)."""
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "body"
        raise ValidationError(f"{field}: {err.get('msg', 'invalid value')}")


def done(request: Request, redirect_to: str, data: dict | None = None):
    """
    Success response for a state-changing request.

    Browsers are sent on with a 303; JSON clients get ``{"success": True, "data": ...}``.
    """
    if wants_json(request):
        return JSONResponse({"success": True, "data": data or {}})
    return RedirectResponse(redirect_to, status_code=303)


def session_id_from_cookie(request: Request) -> str | None:
    """Raw session id from the app's session cookie; None when absent, forged or expired."""
    token = request.cookies.get(get_settings(request).session_cookie_name)
    if not token:
        return None
    try:
        return decode_session_token(token)
    except jwt.InvalidTokenError:
        return None


async def get_current_session(request: Request) -> Session | None:
    """
    FastAPI dependency resolving the session cookie, or None.

    The cookie holds a signed token wrapping the raw session id; the session
    row is looked up by the id's hash. Forged, expired or revoked cookies all
    resolve to None.
    """
    sid = session_id_from_cookie(request)
    if sid is None:
        return None
    return await accounts.lookup_session(sid)


async def require_authenticated(session: Session | None = Depends(get_current_session)) -> Session:
    """
    Allow only requests with a live session.

    Raises:
        AuthenticationRequired: rendered as a redirect to /login for browsers,
            401 AUTH_REQUIRED for JSON clients
    """
    if session is None or not session.user_email:
        raise AuthenticationRequired()
    return session


async def require_admin(
    request: Request,
    session: Session = Depends(require_authenticated),
) -> Session:
    """
    Allow only sessions whose role is "admin".

    The role is the snapshot taken at login unless REFRESH_ROLE_ON_ADMIN is
    set, in which case it is re-read from the user record.

    Raises:
        AuthenticationRequired: no live session
        AuthorizationError (403): authenticated but not an admin
    """
    role = session.role
    if get_settings(request).refresh_role_on_admin:
        role = await accounts.current_role(session.user_email)
    if role != "admin":
        raise AuthorizationError()
    return session
