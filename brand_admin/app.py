"""
FastAPI application instance with lifespan management.

This module creates the FastAPI application with the proxy routers, the
admin pages, middleware, and lifespan management for logging and the
upstream HTTP client.
"""

from fastapi import FastAPI

from brand_admin.controller.brand import router as brand_router
from brand_admin.controller.pages import router as pages_router
from brand_admin.controller.upload import router as upload_router
from brand_admin.exceptions.handler import register_exception_handlers
from brand_admin.lifespan import lifespan
from brand_admin.middleware import LoggingMiddleware, RequestContextMiddleware
from brand_admin.models.errors import HTTPException
from brand_admin.settings import get_settings

# Load settings
settings = get_settings()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        responses={
            404: {"model": HTTPException, "description": "Resource Not Found"},
            422: {"model": HTTPException, "description": "Unprocessable Entity"},
        },
    )
    register_exception_handlers(app)
    app.add_middleware(
        LoggingMiddleware,
        slow_request_threshold_ms=settings.SERVER.SLOW_REQUEST_THRESHOLD_MS,
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(brand_router, prefix="/api")
    app.include_router(upload_router, prefix="/api")
    app.include_router(pages_router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint. Does not contact the upstream."""
        from brand_admin.upstream import get_upstream

        try:
            upstream = get_upstream()
        except RuntimeError:
            return {"status": "starting", "upstream_client": False}
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "upstream_client": upstream.is_initialized,
        }

    return app


# Create the application instance
app: FastAPI = create_app()
