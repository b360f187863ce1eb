"""
Identity Gateway — Google OAuth sign-in and JWT-backed sessions.

The OAuth round trip is handled by authlib; once the provider has vouched
for an email we issue our own signed token, and that token is the only
thing later requests need to present.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import httpx
from authlib.integrations.starlette_client import OAuth, OAuthError
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request

from ideaswipe.config import Settings
from ideaswipe.errors import Unauthorized, UpstreamFailure, UpstreamTimeout, ValidationError
from ideaswipe.schemas.session import Session

logger = logging.getLogger(__name__)

COOKIE_KEY = "access_token"
PROVIDER = "google"


class IdentityGateway:

    def __init__(self, settings: Settings):
        self.settings = settings
        self.oauth = OAuth()
        self.oauth.register(
            name=PROVIDER,
            client_id=settings.GOOGLE_CLIENT_ID,
            client_secret=settings.GOOGLE_CLIENT_SECRET,
            server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
            client_kwargs={"scope": "openid email profile"},
        )

    # ═══════════════════════════════════════════════════════════════
    #  Tokens
    # ═══════════════════════════════════════════════════════════════

    def create_access_token(self, email: str) -> str:
        """Create a signed JWT with an expiry claim."""
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
        return jwt.encode(
            {"sub": email, "exp": expire},
            self.settings.SECRET_KEY,
            algorithm=self.settings.ALGORITHM,
        )

    def issue_session(self, email: str) -> Session:
        try:
            return Session(email=email, access_token=self.create_access_token(email))
        except PydanticValidationError:
            raise ValidationError(f"Not a valid email address: {email}")

    def session_from_token(self, token: Optional[str]) -> Optional[Session]:
        """Decode a token; None when it is missing, tampered with, or expired."""
        if not token:
            return None
        try:
            payload = jwt.decode(
                token, self.settings.SECRET_KEY, algorithms=[self.settings.ALGORITHM]
            )
        except JWTError:
            return None
        email = payload.get("sub")
        if not email:
            return None
        try:
            return Session(email=email, access_token=token)
        except PydanticValidationError:
            return None

    def current_session(self, request: Request) -> Optional[Session]:
        token = request.cookies.get(COOKIE_KEY)
        if not token:
            header = request.headers.get("authorization", "")
            scheme, _, credentials = header.partition(" ")
            if scheme.lower() == "bearer":
                token = credentials.strip()
        return self.session_from_token(token)

    # ═══════════════════════════════════════════════════════════════
    #  OAuth flow
    # ═══════════════════════════════════════════════════════════════

    async def sign_in(self, request: Request, redirect_uri: str):
        """Redirect the user to the provider's consent screen."""
        client = self.oauth.create_client(PROVIDER)
        try:
            return await client.authorize_redirect(request, redirect_uri)
        except httpx.HTTPError as e:
            raise self._provider_failure(e, "start sign-in") from e

    async def complete_sign_in(self, request: Request) -> Session:
        """Exchange the provider callback for a session bound to a verified email."""
        client = self.oauth.create_client(PROVIDER)
        try:
            token = await client.authorize_access_token(request)
        except OAuthError as e:
            logger.warning(f"OAuth callback rejected: {e.error}")
            raise Unauthorized(f"Authentication failed: {e.description or e.error}")
        except httpx.HTTPError as e:
            raise self._provider_failure(e, "complete sign-in") from e

        userinfo = token.get("userinfo") or {}
        email = userinfo.get("email")
        if not email or not userinfo.get("email_verified", False):
            raise Unauthorized("Could not retrieve a verified email from the provider")

        logger.info(f"{email} signed in via {PROVIDER}")
        return self.issue_session(email)

    @staticmethod
    def _provider_failure(error: httpx.HTTPError, what: str) -> UpstreamFailure:
        if isinstance(error, httpx.TimeoutException):
            logger.warning(f"Identity provider timed out while trying to {what}")
            return UpstreamTimeout(f"Identity provider timed out while trying to {what}")
        logger.error(f"Identity provider call failed while trying to {what}: {error!r}")
        return UpstreamFailure(f"Identity provider unavailable, could not {what}")
