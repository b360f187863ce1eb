"""
IdeaSwipe — FastAPI application entry-point.

Run with:
    uvicorn ideaswipe.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

import ideaswipe.models  # noqa: F401  (registers tables on Base.metadata)
from ideaswipe.config import Settings, settings as default_settings
from ideaswipe.database import Database
from ideaswipe.errors import register_exception_handlers
from ideaswipe.services.identity import IdentityGateway

# ── Import routers ──
from ideaswipe.routers import auth, comments, feed, ideas, profile

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings
    database = database or Database(settings.DATABASE_URL, echo=settings.DEBUG)

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ── Lifespan: create tables on startup ──
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.create_all()
        logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
        yield
        await database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Swipe through startup ideas — like, pass, comment, share.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.identity = IdentityGateway(settings)

    # ── Session middleware (required for OAuth state) ──
    app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY, https_only=not settings.DEBUG)
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=("*",))

    register_exception_handlers(app)

    # ── Register API routers ──
    app.include_router(auth.router)
    app.include_router(ideas.router)
    app.include_router(comments.router)
    app.include_router(feed.router)
    app.include_router(profile.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    if settings.ENVIRONMENT != "production":
        @app.get("/mock-login/{email}", tags=["auth"])
        async def mock_login(email: str):
            """Development sign-in that skips the OAuth round trip."""
            from fastapi.responses import JSONResponse

            session = app.state.identity.issue_session(email)
            resp = JSONResponse(session.model_dump())
            return auth.set_auth_cookie(resp, session, settings)

    return app


app = create_app()
