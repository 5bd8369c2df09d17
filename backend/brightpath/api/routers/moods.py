# brightpath/api/routers/moods.py
from fastapi import APIRouter, Depends, Request

from brightpath.api.deps import done, parse_body, read_payload, require_authenticated
from brightpath.models.session import Session
from brightpath.schemas.entries import MoodIn
from brightpath.services import wellness

router = APIRouter(tags=["moods"])


@router.post("/mood")
@router.post("/submit-mood")
async def submit_mood(request: Request, session: Session = Depends(require_authenticated)):
    """
    Record a mood for the logged-in user.

    Body: ``mood`` (required, non-blank), ``stressLevel`` (optional 0..10).
    Browsers are redirected to /dashboard; JSON clients get the stored entry.
    """
    body = parse_body(MoodIn, await read_payload(request))
    m = await wellness.create_mood(session.user_email, body.mood, body.stressLevel)
    return done(request, "/dashboard", wellness.mood_to_dict(m))


@router.get("/my-moods")
async def my_moods(session: Session = Depends(require_authenticated)):
    """The caller's moods, newest first."""
    return [wellness.mood_to_dict(m) for m in await wellness.list_moods(owner=session.user_email)]
