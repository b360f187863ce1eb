"""
Authentication router — Google OAuth sign-in + JWT cookie.

Endpoints:
    GET  /auth/login     → redirect to the OAuth consent screen
    GET  /auth/callback  → handle OAuth callback, set JWT cookie
    GET  /auth/session   → the current session, or 401
    GET  /auth/logout    → clear JWT cookie
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse, Response

from ideaswipe.config import Settings
from ideaswipe.dependencies import get_current_session, get_identity, get_settings
from ideaswipe.errors import Unauthorized
from ideaswipe.schemas.session import Session
from ideaswipe.services.identity import COOKIE_KEY, IdentityGateway

router = APIRouter(prefix="/auth", tags=["auth"])


def set_auth_cookie(response: Response, session: Session, settings: Settings) -> Response:
    """Attach the JWT cookie to a response."""
    response.set_cookie(
        key=COOKIE_KEY,
        value=session.access_token,
        httponly=True,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="lax",
        secure=not settings.DEBUG,
    )
    return response


# ═══════════════════════════════════════════════════════════════
#  OAuth flow
# ═══════════════════════════════════════════════════════════════

@router.get("/login")
async def oauth_login(
    request: Request,
    identity: IdentityGateway = Depends(get_identity),
):
    """Redirect the user to Google's OAuth consent screen."""
    redirect_uri = request.url_for("oauth_callback")
    return await identity.sign_in(request, str(redirect_uri))


@router.get("/callback")
async def oauth_callback(
    request: Request,
    identity: IdentityGateway = Depends(get_identity),
    settings: Settings = Depends(get_settings),
):
    """Handle the OAuth callback: issue a session and set the JWT cookie."""
    session = await identity.complete_sign_in(request)
    response = RedirectResponse(url="/feed", status_code=status.HTTP_303_SEE_OTHER)
    return set_auth_cookie(response, session, settings)


# ═══════════════════════════════════════════════════════════════
#  Session
# ═══════════════════════════════════════════════════════════════

@router.get("/session", response_model=Session)
async def current_session(session: Optional[Session] = Depends(get_current_session)):
    if not session:
        raise Unauthorized("Not signed in")
    return session


@router.get("/logout")
async def logout():
    """Clear the auth cookie and redirect to the landing page."""
    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(key=COOKIE_KEY)
    return response
