# brightpath/api/routers/admin.py
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import FileResponse

from brightpath.api.deps import get_settings, require_admin, wants_json
from brightpath.api.routers.pages import page
from brightpath.core.errors import NotFoundError
from brightpath.services import wellness

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("")
async def admin_panel(request: Request):
    """
    Admin panel (admin only).

    Browsers get the admin page, which loads /admin/data; JSON clients get
    the aggregation directly.
    """
    if wants_json(request):
        return await wellness.admin_overview(get_settings(request))
    return FileResponse(page("admin"))


@router.get("/data")
async def admin_data(
    request: Request,
    email: str | None = Query(default=None),
    userEmail: str | None = Query(default=None),
    mood: str | None = Query(default=None),
):
    """
    All stored entries (admin only), newest first.

    Args:
        email: Optional exact match on the mood owner (``userEmail`` is accepted too)
        mood: Optional exact match on the mood label; combined with ``email`` by AND

    Returns:
        dict: ``moods`` plus ``journals``, ``feedbacks`` and ``confessions`` for
        every collection that is enabled

    Raises:
        AuthorizationError (403): If the session is not an admin
        AuthenticationRequired: If there is no session
    """
    return await wellness.admin_overview(get_settings(request), email=email or userEmail or None, mood=mood or None)


@router.get("/anonymous")
async def admin_anonymous(request: Request):
    """Anonymous confessions (admin only), newest first."""
    if not get_settings(request).enable_confessions:
        raise NotFoundError()
    return [wellness.confession_to_dict(c) for c in await wellness.list_confessions()]
