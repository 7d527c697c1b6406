"""FastAPI application."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .. import __version__
from ..config import Settings
from ..engine import InnovationResponder
from .routes import create_router


class OriginCheckMiddleware(BaseHTTPMiddleware):
    """Reject state-changing requests from unknown origins.

    Requests without an Origin header (same-origin, curl, the CLI) pass.
    """

    def __init__(self, app, allowed_origins: set[str | None]):
        super().__init__(app)
        self.allowed_origins = allowed_origins

    async def dispatch(self, request: Request, call_next):
        if request.method in ("POST", "PUT", "DELETE", "PATCH"):
            origin = request.headers.get("origin")
            if origin is not None and origin not in self.allowed_origins:
                return JSONResponse(
                    status_code=403,
                    content={"detail": "Origin not allowed"},
                )

        return await call_next(request)


def create_app(settings: Settings, responder: Optional[InnovationResponder] = None) -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title="Idea Forge",
        description="Domain-aware innovation chat backend",
        version=__version__,
    )

    app.add_middleware(
        OriginCheckMiddleware,
        allowed_origins=settings.get_allowed_origins(),
    )

    if responder is None:
        responder = InnovationResponder(settings)
    app.state.responder = responder

    app.include_router(create_router(settings, responder))

    return app
