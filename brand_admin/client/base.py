"""
Shared HTTP plumbing for the client API wrapper.
"""

from typing import Any, Optional

import httpx
import structlog

from brand_admin.exceptions.client import ClientAPIException

logger = structlog.get_logger(__name__)


class APIClient:
    """
    Thin wrapper around an httpx AsyncClient bound to the proxy routes.

    Every call is a single request: no retries, no caching. Successful
    responses return the parsed JSON body; anything else raises
    ClientAPIException for the caller to handle.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        auth_token: Optional[str] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def _get_headers(self) -> dict:
        headers = {}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = {**self._get_headers(), **kwargs.pop("headers", {})}
        try:
            response = await self.client.request(
                method, path, headers=headers, **kwargs
            )
        except httpx.HTTPError as e:
            logger.error(
                "Client API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise ClientAPIException(
                message=str(e) or "Request failed", path=path
            ) from e

        if response.is_error:
            error, details = self._read_error(response)
            logger.warning(
                "Client API request returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
                error=error,
            )
            raise ClientAPIException(
                message=error or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                error=error,
                details=details,
                path=path,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ClientAPIException(
                message="Response is not valid JSON",
                status_code=response.status_code,
                path=path,
            ) from e

    @staticmethod
    def _read_error(
        response: httpx.Response,
    ) -> tuple[Optional[str], Optional[str]]:
        """Pull ``error``/``details`` out of an error envelope when there is one."""
        try:
            body = response.json()
        except ValueError:
            return None, None
        if not isinstance(body, dict):
            return None, None
        error = body.get("error")
        details = body.get("details")
        return (
            str(error) if error else None,
            str(details) if details else None,
        )

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
