"""
Service layer for relaying requests to the brand backend.

This service rebuilds an inbound request against the configured upstream
origin, forwards it through the shared HTTP client, and returns the parsed
JSON body. Any failure is raised as an UpstreamException subclass so the
routes can translate it into the error envelope.
"""

from typing import Any

import httpx
import structlog
from fastapi import Request
from starlette.datastructures import UploadFile

from brand_admin.exceptions.upstream import (
    UpstreamException,
    UpstreamResponseException,
    UpstreamStatusException,
)
from brand_admin.models.upload import Part, field_part
from brand_admin.upstream import UpstreamClient

logger = structlog.get_logger(__name__)

FORWARDED_HEADERS = ("content-type", "authorization")


class ProxyService:
    """
    Forwards requests to the brand backend.

    One instance is created per request; it holds no state besides the
    shared upstream client.
    """

    def __init__(self, upstream: UpstreamClient) -> None:
        self.upstream = upstream

    async def forward(self, request: Request, path: str) -> Any:
        """
        Relay the request body unmodified to ``path`` on the upstream.

        Args:
            request: Inbound request; method, query string, Content-Type and
                body are reused as-is
            path: Upstream resource path with parameters already substituted

        Returns:
            Parsed JSON body of the upstream response

        Raises:
            UpstreamException: If the upstream is unreachable
            UpstreamStatusException: If the upstream answers with a non-2xx status
            UpstreamResponseException: If the upstream body is not JSON
        """
        url = self.upstream.build_url(path, request.url.query)
        headers = {
            name: request.headers[name]
            for name in FORWARDED_HEADERS
            if name in request.headers
        }
        body = await request.body() if request.method != "GET" else None

        logger.debug(
            "Forwarding request to upstream",
            upstream_url=url,
            method=request.method,
        )
        response = await self._send(
            request.method, url, headers=headers, content=body
        )
        return self._parse(response, url)

    async def forward_form(self, request: Request, path: str) -> Any:
        """
        Parse the inbound multipart form and re-encode it for the upstream.

        Fields and files keep their order and repeated keys. The outbound
        body is always multipart, even without files; its Content-Type and
        boundary are computed by httpx rather than copied from the request.
        """
        url = self.upstream.build_url(path, request.url.query)
        parts: list[Part] = []
        file_count = 0

        form = await request.form()
        try:
            for key, value in form.multi_items():
                if isinstance(value, UploadFile):
                    content = await value.read()
                    parts.append(
                        (
                            key,
                            (
                                value.filename or key,
                                content,
                                value.content_type or "application/octet-stream",
                            ),
                        )
                    )
                    file_count += 1
                else:
                    parts.append(field_part(key, value))
        finally:
            await form.close()

        headers = {}
        if "authorization" in request.headers:
            headers["authorization"] = request.headers["authorization"]

        logger.debug(
            "Forwarding multipart form to upstream",
            upstream_url=url,
            part_count=len(parts),
            file_count=file_count,
        )
        response = await self._send(
            "POST", url, headers=headers, files=parts
        )
        return self._parse(response, url)

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self.upstream.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(
                "Upstream request failed",
                upstream_url=url,
                method=method,
                error=str(e),
            )
            raise UpstreamException(
                message=str(e) or type(e).__name__, url=url
            ) from e

    def _parse(self, response: httpx.Response, url: str) -> Any:
        if not response.is_success:
            logger.warning(
                "Upstream responded with an error status",
                upstream_url=url,
                status_code=response.status_code,
            )
            raise UpstreamStatusException(response.status_code, url=url)
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "Upstream response is not valid JSON",
                upstream_url=url,
                error=str(e),
            )
            raise UpstreamResponseException(url=url) from e
