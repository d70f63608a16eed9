"""
HTTP client manager for the brand backend using httpx.

This module owns the single AsyncClient used by every proxy route.
It handles client creation and lifecycle management, mirroring how the
application manages any other long-lived connection resource.
"""

from typing import Optional

import httpx
import structlog

from brand_admin.settings.upstream import UpstreamConfig

logger = structlog.get_logger(__name__)


class UpstreamClient:
    """
    Manages the httpx AsyncClient pointed at the brand backend.
    """

    def __init__(
        self,
        config: UpstreamConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the upstream client manager.

        Args:
            config: Upstream configuration settings
            transport: Optional transport override, used to run against an
                in-process backend
        """
        self.config = config
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def connect(self) -> None:
        if self._client is not None:
            logger.warning("Upstream client already initialized")
            return

        logger.info(
            "Creating upstream HTTP client",
            base_url=self.config.BASE_URL,
            timeout=self.config.TIMEOUT,
        )
        self._client = httpx.AsyncClient(
            timeout=self.config.TIMEOUT,
            transport=self.transport,
        )

    async def disconnect(self) -> None:
        if self._client is None:
            logger.warning("Upstream client not initialized or already closed")
            return

        try:
            await self._client.aclose()
            logger.info("Upstream HTTP client closed")
        finally:
            self._client = None

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> httpx.AsyncClient:
        """
        Get the underlying AsyncClient.

        Raises:
            RuntimeError: If the client has not been connected
        """
        if self._client is None:
            raise RuntimeError(
                "Upstream client is not initialized. Call connect() first."
            )
        return self._client

    def build_url(self, path: str, query: str = "") -> str:
        """Join base origin, resource path and the raw query string."""
        url = f"{self.config.BASE_URL}{path}"
        if query:
            url = f"{url}?{query}"
        return url


# Global upstream client instance
_upstream: Optional[UpstreamClient] = None


def get_upstream() -> UpstreamClient:
    """
    Get the global upstream client instance.

    Raises:
        RuntimeError: If the client has not been initialized
    """
    if _upstream is None:
        raise RuntimeError(
            "Upstream client not initialized. Call init_upstream() first."
        )
    return _upstream


def init_upstream(
    config: UpstreamConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> UpstreamClient:
    """
    Initialize the global upstream client instance.

    Args:
        config: Upstream configuration
        transport: Optional transport override

    Returns:
        UpstreamClient instance
    """
    global _upstream
    if _upstream is None:
        _upstream = UpstreamClient(config, transport=transport)
        logger.info("Upstream client instance created")
    return _upstream


async def close_upstream() -> None:
    """Close the global upstream client instance."""
    global _upstream
    if _upstream is not None:
        await _upstream.disconnect()
        _upstream = None
        logger.info("Upstream client instance closed and cleaned up")
