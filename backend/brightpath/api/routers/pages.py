# brightpath/api/routers/pages.py
"""
Prebuilt HTML pages shipped in brightpath/static.
"""
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from brightpath.api.deps import require_authenticated

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

router = APIRouter(tags=["pages"])


def page(name: str) -> Path:
    return STATIC_DIR / f"{name}.html"


@router.get("/")
async def index():
    return FileResponse(page("index"))


@router.get("/login")
async def login_page():
    return FileResponse(page("login"))


@router.get("/signup")
async def signup_page():
    return FileResponse(page("signup"))


@router.get("/dashboard", dependencies=[Depends(require_authenticated)])
async def dashboard_page():
    return FileResponse(page("dashboard"))
