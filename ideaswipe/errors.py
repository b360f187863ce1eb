"""
Service error hierarchy and the FastAPI handlers that render it.

Every error carries the HTTP status it maps to, so routes simply let
service exceptions propagate.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ServiceError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Invalid request"


class ConflictOrRace(ServiceError):
    """A concurrent write beat us to a uniqueness-constrained insert."""

    status_code = 409
    default_message = "Conflicting concurrent update"


class UpstreamFailure(ServiceError):
    status_code = 500
    default_message = "Datastore request failed"


class UpstreamTimeout(UpstreamFailure):
    default_message = "Datastore request timed out"


# ═══════════════════════════════════════════════════════════════
#  Handlers
# ═══════════════════════════════════════════════════════════════

async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", ""))
    return JSONResponse(status_code=400, content={"detail": "; ".join(messages) or "Invalid request"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
