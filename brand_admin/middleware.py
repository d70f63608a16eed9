"""
Request middleware: request IDs, structlog context and access logging.
"""
from time import perf_counter
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from structlog import get_logger
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = frozenset({"/health"})


def route_kind(path: str) -> str:
    """``proxy`` for the relay routes, ``page`` for the admin pages."""
    return "proxy" if path == "/api" or path.startswith("/api/") else "page"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID (reusing the caller's X-Request-ID when sent)
    and bind it to the structlog context for the lifetime of the request.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        clear_contextvars()
        bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            route=route_kind(request.url.path),
        )
        try:
            response = await call_next(request)
        finally:
            clear_contextvars()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, slow_request_threshold_ms: float = 1000.0):
        super().__init__(app)
        self.slow_request_threshold_ms = slow_request_threshold_ms

    async def dispatch(self, request: Request, call_next):
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = perf_counter()
        response = await call_next(request)
        duration_ms = round((perf_counter() - started) * 1000, 2)

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "request_completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        if duration_ms > self.slow_request_threshold_ms:
            logger.warning(
                "slow_request_detected",
                duration_ms=duration_ms,
                threshold_ms=self.slow_request_threshold_ms,
            )
        return response
