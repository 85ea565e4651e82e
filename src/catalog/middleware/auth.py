"""API key authentication middleware."""

import secrets
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

PUBLIC_PATHS = frozenset(
    {
        "/api/v1/health/live",
        "/api/v1/health/ready",
    }
)

READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Require an X-API-Key header for catalog writes.

    Reads stay public unless ``protect_reads`` is set. Health checks are
    always public.
    """

    def __init__(
        self,
        app: Callable[..., Awaitable[Response]],
        api_key: str,
        protect_reads: bool = False,
    ) -> None:
        """Initialize middleware with API key.

        Args:
            app: ASGI application.
            api_key: Expected API key value.
            protect_reads: Also require the key for GET requests.
        """
        super().__init__(app)  # type: ignore[arg-type]
        self._api_key = api_key
        self._protect_reads = protect_reads

    def _is_public(self, request: Request) -> bool:
        if request.url.path in PUBLIC_PATHS:
            return True
        return not self._protect_reads and request.method in READ_METHODS

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Validate the API key on protected requests.

        Returns:
            HTTP response, or 401 if authentication fails.
        """
        if self._is_public(request):
            return await call_next(request)

        provided_key = request.headers.get("X-API-Key", "")

        if not provided_key:
            return JSONResponse(
                status_code=401,
                content={"error": "Missing X-API-Key header"},
            )

        if not secrets.compare_digest(provided_key, self._api_key):
            return JSONResponse(
                status_code=401,
                content={"error": "Invalid API key"},
            )

        return await call_next(request)
