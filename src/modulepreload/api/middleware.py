"""ASGI middleware allowing cross-origin retrieval of every served file."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from modulepreload.api.static import RETRIEVAL_METHODS


class AllowAnyOriginMiddleware(BaseHTTPMiddleware):
    """Sets ``access-control-allow-origin: *`` on retrieval responses, including 404s."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        if request.method in RETRIEVAL_METHODS:
            response.headers["access-control-allow-origin"] = "*"
        return response
