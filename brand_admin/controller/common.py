"""
Helpers shared by the proxy routers: CORS headers, preflight responses and
the translation of relay failures into the error envelope.
"""

from typing import Any, Awaitable, Sequence

import structlog
from fastapi import status
from fastapi.responses import JSONResponse, Response

from brand_admin.exceptions.app import AppException
from brand_admin.models.errors import ErrorEnvelope
from brand_admin.settings import Settings

logger = structlog.get_logger(__name__)


def cors_headers(settings: Settings, methods: Sequence[str]) -> dict[str, str]:
    """Permissive CORS header triple for a route supporting ``methods``."""
    return {
        "Access-Control-Allow-Origin": settings.SERVER.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": ", ".join([*methods, "OPTIONS"]),
        "Access-Control-Allow-Headers": ", ".join(settings.SERVER.CORS_ALLOW_HEADERS),
    }


def preflight(settings: Settings, methods: Sequence[str]) -> Response:
    """Empty 200 answer to OPTIONS; the upstream is never contacted."""
    return Response(status_code=status.HTTP_200_OK, headers=cors_headers(settings, methods))


def error_envelope(
    settings: Settings, error_message: str, exc: Exception
) -> ErrorEnvelope:
    details = None
    if settings.UPSTREAM.INCLUDE_ERROR_DETAILS:
        details = exc.message if isinstance(exc, AppException) else str(exc)
    return ErrorEnvelope(error=error_message, details=details)


async def relay(
    call: Awaitable[Any],
    *,
    settings: Settings,
    methods: Sequence[str],
    error_message: str,
) -> JSONResponse:
    """
    Await a proxy call and wrap its outcome.

    Success echoes the upstream JSON with status 200. Any exception, including
    a non-2xx upstream status, becomes a 500 with the shared error envelope;
    the upstream status and body are not propagated.
    """
    headers = cors_headers(settings, methods)
    try:
        data = await call
    except Exception as e:
        logger.error(
            "API proxy error",
            error=str(e),
            error_type=type(e).__name__,
        )
        envelope = error_envelope(settings, error_message, e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=envelope.model_dump(exclude_none=True),
            headers=headers,
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content=data, headers=headers)
