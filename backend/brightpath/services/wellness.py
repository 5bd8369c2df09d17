# brightpath/services/wellness.py
"""
Wellness entries: creation, self-scoped listings and the admin aggregation.

Every listing is newest first. ``created_at`` is stamped by the ORM at insert
and the integer primary key breaks ties, so order always follows insertion.
"""
from brightpath.config import Settings
from brightpath.core.errors import ValidationError
from brightpath.models.entries import Confession, Feedback, Journal, Mood

NEWEST_FIRST = ("-created_at", "-id")


def _required_text(value: str | None, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field} is required")
    return text


def _ts(value) -> str | None:
    return value.isoformat() if value else None


# ===== Serializers =====
def mood_to_dict(m: Mood) -> dict:
    return {
        "id": m.id,
        "userEmail": m.user_email,
        "mood": m.mood,
        "stressLevel": m.stress_level,
        "createdAt": _ts(m.created_at),
    }


def journal_to_dict(j: Journal) -> dict:
    return {"id": j.id, "userEmail": j.user_email, "content": j.content, "createdAt": _ts(j.created_at)}


def confession_to_dict(c: Confession) -> dict:
    return {"id": c.id, "message": c.message, "createdAt": _ts(c.created_at)}


def feedback_to_dict(f: Feedback) -> dict:
    return {"id": f.id, "userEmail": f.user_email, "message": f.message, "createdAt": _ts(f.created_at)}


# ===== Create =====
async def create_mood(owner: str, mood: str | None, stress_level: int | None = None) -> Mood:
    return await Mood.create(
        user_email=owner,
        mood=_required_text(mood, "mood"),
        stress_level=stress_level,
    )


async def create_journal(owner: str, content: str | None) -> Journal:
    return await Journal.create(user_email=owner, content=_required_text(content, "content"))


async def create_confession(message: str | None) -> Confession:
    """Store an anonymous message. Takes no caller argument on purpose."""
    return await Confession.create(message=_required_text(message, "message"))


async def create_feedback(owner: str | None, message: str | None) -> Feedback:
    return await Feedback.create(user_email=owner, message=_required_text(message, "message"))


# ===== Read =====
async def list_moods(owner: str | None = None, mood: str | None = None) -> list[Mood]:
    """All moods, optionally narrowed by exact owner and/or exact label (AND)."""
    qs = Mood.all()
    if owner:
        qs = qs.filter(user_email=owner)
    if mood:
        qs = qs.filter(mood=mood)
    return await qs.order_by(*NEWEST_FIRST)


async def list_journals(owner: str | None = None) -> list[Journal]:
    qs = Journal.all()
    if owner:
        qs = qs.filter(user_email=owner)
    return await qs.order_by(*NEWEST_FIRST)


async def list_confessions() -> list[Confession]:
    return await Confession.all().order_by(*NEWEST_FIRST)


async def list_feedbacks() -> list[Feedback]:
    return await Feedback.all().order_by(*NEWEST_FIRST)


async def admin_overview(cfg: Settings, email: str | None = None, mood: str | None = None) -> dict:
    """
    Aggregate every collection for the admin views.

    Args:
        cfg: active settings; disabled collections are left out of the result
        email: optional exact-match filter on mood owner
        mood: optional exact-match filter on mood label

    Returns:
        dict with "moods" and, when enabled, "journals", "feedbacks", "confessions"
    """
    data = {"moods": [mood_to_dict(m) for m in await list_moods(owner=email, mood=mood)]}
    if cfg.enable_journal:
        data["journals"] = [journal_to_dict(j) for j in await list_journals()]
    if cfg.enable_feedback:
        data["feedbacks"] = [feedback_to_dict(f) for f in await list_feedbacks()]
    if cfg.enable_confessions:
        data["confessions"] = [confession_to_dict(c) for c in await list_confessions()]
    return data
