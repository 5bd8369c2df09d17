# brightpath/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from tortoise.exceptions import DBConnectionError, OperationalError

from brightpath.config import Settings, settings
from brightpath.core.db import init_db, close_db
from brightpath.core.bootstrap import ensure_default_admin
from brightpath.core.errors import AuthenticationRequired, AuthorizationError, BrightPathError
from brightpath.api.deps import wants_json
from brightpath.api.routers import admin, auth, journals, messages, moods, pages

logger = logging.getLogger("uvicorn.error")


async def _brightpath_error(request: Request, exc: BrightPathError):
    """
    Render application errors at the request boundary.

    - Missing session: browsers are redirected to /login
    - Auth gate failures for JSON clients: ``{"detail": CODE}``
    - Everything else: ``{"success": False, "error": {...}}`` for JSON clients,
      the plain message for browsers
    """
    as_json = wants_json(request)
    if isinstance(exc, AuthenticationRequired) and not as_json:
        return RedirectResponse("/login", status_code=303)
    if isinstance(exc, (AuthenticationRequired, AuthorizationError)) and as_json:
        return JSONResponse({"detail": exc.code}, status_code=exc.status_code)
    if as_json:
        return JSONResponse(
            {"success": False, "error": {"code": exc.code, "message": exc.message}},
            status_code=exc.status_code,
        )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def _store_error(request: Request, exc: Exception):
    logger.exception("[db] %s %s failed", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        {"success": False, "error": {"code": "STORE_ERROR", "message": "Internal server error"}},
        status_code=500,
    )


def create_app(cfg: Settings = settings) -> FastAPI:
    """
    Build the BrightPath app.

    Optional collections (journal, feedback, confessions) only get their
    routes when enabled in ``cfg``.
    """
    app = FastAPI(title=cfg.APP_NAME)
    app.state.settings = cfg

    if cfg.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cfg.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(BrightPathError, _brightpath_error)
    app.add_exception_handler(OperationalError, _store_error)
    app.add_exception_handler(DBConnectionError, _store_error)

    @app.on_event("startup")
    async def on_startup():
        await init_db(generate_schemas=cfg.generate_schemas)
        # Ensure there's a default admin account on first run
        await ensure_default_admin()
        logger.info("[startup] %s ready (env=%s)", cfg.APP_NAME, cfg.env)

    @app.on_event("shutdown")
    async def on_shutdown():
        await close_db()

    app.include_router(pages.router)
    app.include_router(auth.router)
    app.include_router(moods.router)
    if cfg.enable_journal:
        app.include_router(journals.router)
    if cfg.enable_confessions:
        app.include_router(messages.confession_router)
    if cfg.enable_feedback:
        app.include_router(messages.feedback_router)
    app.include_router(admin.router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run("brightpath.main:app", host=settings.host, port=settings.port)
