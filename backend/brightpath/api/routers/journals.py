# brightpath/api/routers/journals.py
from fastapi import APIRouter, Depends, Request

from brightpath.api.deps import done, parse_body, read_payload, require_authenticated
from brightpath.models.session import Session
from brightpath.schemas.entries import JournalIn
from brightpath.services import wellness

router = APIRouter(tags=["journals"])


@router.post("/journal")
async def submit_journal(request: Request, session: Session = Depends(require_authenticated)):
    body = parse_body(JournalIn, await read_payload(request))
    j = await wellness.create_journal(session.user_email, body.content)
    return done(request, "/dashboard", wellness.journal_to_dict(j))


@router.get("/my-journals")
async def my_journals(session: Session = Depends(require_authenticated)):
    """The caller's journal entries, newest first."""
    return [wellness.journal_to_dict(j) for j in await wellness.list_journals(owner=session.user_email)]
