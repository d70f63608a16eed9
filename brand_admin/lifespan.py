"""
FastAPI lifespan context manager for application startup and shutdown.

This module provides a lifespan context manager that handles:
- Logging and error reporting configuration
- Upstream HTTP client initialization and cleanup
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from brand_admin.logging import setup_logging
from brand_admin.sentry import setup_sentry
from brand_admin.settings import get_settings
from brand_admin.upstream import close_upstream, init_upstream

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Handles application startup and shutdown events:
    - Startup: Setup logging and open the upstream HTTP client
    - Shutdown: Close the upstream HTTP client

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    logger.debug("Application startup initiated")
    try:
        settings = get_settings()
        setup_logging(settings)
        setup_sentry(settings)

        upstream = init_upstream(settings.UPSTREAM)
        await upstream.connect()

        logger.debug(
            "Application startup completed successfully",
            upstream_base_url=upstream.config.BASE_URL,
        )

    except Exception as e:
        logger.error(
            "Failed to initialize application",
            error=str(e),
            exc_info=True,
        )
        raise

    yield

    logger.debug("Application shutdown initiated")

    try:
        await close_upstream()
        logger.debug("Application shutdown completed successfully")

    except Exception as e:
        logger.error(
            "Error during application shutdown",
            error=str(e),
            exc_info=True,
        )
        raise
