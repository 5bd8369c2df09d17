# brightpath/api/routers/messages.py
"""
Free-text messages: anonymous confessions and feedback.
"""
from fastapi import APIRouter, Depends, Request

from brightpath.api.deps import done, get_current_session, get_settings, parse_body, read_payload
from brightpath.core.errors import AuthenticationRequired
from brightpath.models.session import Session
from brightpath.schemas.entries import MessageIn
from brightpath.services import wellness

confession_router = APIRouter(tags=["confessions"])
feedback_router = APIRouter(tags=["feedback"])


@confession_router.post("/confession")
@confession_router.post("/confess")
@confession_router.post("/anonymous")
async def submit_confession(request: Request):
    """
    Store an anonymous message.

    No auth, and the session cookie is never read here: the stored record
    holds only the message and its timestamp.
    """
    body = parse_body(MessageIn, await read_payload(request))
    c = await wellness.create_confession(body.message)
    return done(request, "/dashboard", wellness.confession_to_dict(c))


@feedback_router.post("/feedback")
async def submit_feedback(request: Request, session: Session | None = Depends(get_current_session)):
    """
    Store feedback, stamped with the caller's email when there is a session.

    With FEEDBACK_REQUIRES_AUTH (default) a session is mandatory.
    """
    if session is None and get_settings(request).feedback_requires_auth:
        raise AuthenticationRequired()
    body = parse_body(MessageIn, await read_payload(request))
    f = await wellness.create_feedback(session.user_email if session else None, body.message)
    return done(request, "/dashboard", wellness.feedback_to_dict(f))
