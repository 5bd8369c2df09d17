# brightpath/api/routers/auth.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse

from brightpath.api.deps import (
    done,
    get_settings,
    parse_body,
    read_payload,
    require_authenticated,
    session_id_from_cookie,
    wants_json,
)
from brightpath.core.security import create_session_token
from brightpath.models.session import Session
from brightpath.schemas.auth import LoginIn, SignupIn
from brightpath.services import accounts

router = APIRouter(tags=["auth"])


@router.post("/signup")
async def signup(request: Request):
    """
    Register a new account.

    Accepts ``email`` (or ``username``), ``password`` and optional ``name``
    from a form or JSON body. The account always gets the default non-admin role.

    Returns:
        303 to /login for browsers; ``{"success": True, "data": user}`` for JSON clients

    Errors:
        - VALIDATION_ERROR (400): email or password missing
        - USER_EXISTS (200, success False): email already registered, nothing inserted
    """
    body = parse_body(SignupIn, await read_payload(request))
    u = await accounts.signup(body.email, body.password, body.name)
    return done(request, "/login", accounts.user_to_dict(u))


@router.post("/login")
async def login(request: Request):
    """
    Authenticate and start a session.

    On success a server-side session is created with the user's current role
    and its signed id is set as an HttpOnly cookie. Admins are sent to /admin,
    everyone else to /dashboard. A session named by the incoming cookie is
    closed first, so one client holds at most one live session.

    Errors:
        - VALIDATION_ERROR (400): email or password missing
        - AUTH_INVALID_CREDENTIALS (401): unknown email or wrong password
    """
    body = parse_body(LoginIn, await read_payload(request))
    user = await accounts.authenticate(body.email, body.password)
    cfg = get_settings(request)
    previous = session_id_from_cookie(request)
    if previous:
        await accounts.close_session(previous)
    sid = await accounts.open_session(user, ttl_seconds=cfg.session_ttl_seconds)

    target = "/admin" if user.role == "admin" else "/dashboard"
    if wants_json(request):
        response = JSONResponse({"success": True, "data": {"user": accounts.user_to_dict(user), "redirect": target}})
    else:
        response = RedirectResponse(target, status_code=303)
    response.set_cookie(
        cfg.session_cookie_name,
        create_session_token(sid, ttl_seconds=cfg.session_ttl_seconds),
        max_age=cfg.session_ttl_seconds,
        httponly=True,
        secure=cfg.session_cookie_secure,
        samesite="lax",
    )
    return response


@router.api_route("/logout", methods=["GET", "POST"])
async def logout(request: Request):
    """
    Destroy the current session and clear the cookie.

    Always succeeds, with or without a session, so calling it twice has the
    same effect as calling it once.
    """
    sid = session_id_from_cookie(request)
    if sid:
        await accounts.close_session(sid)
    response = done(request, "/login")
    response.delete_cookie(get_settings(request).session_cookie_name)
    return response


@router.get("/me")
async def me(session: Session = Depends(require_authenticated)):
    """Identity and role recorded in the current session."""
    return {"success": True, "data": {"email": session.user_email, "role": session.role}}
