"""
Custom exceptions for requests relayed to the brand backend.
"""

from typing import Optional

from brand_admin.exceptions.app import AppException, ErrorTypes


class UpstreamException(AppException):
    """Exception raised when the brand backend cannot be reached."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(
            type=ErrorTypes.ExternalServiceError,
            message=message,
            resource="upstream",
            value=url,
            **kwargs,
        )
        self.url = url


class UpstreamStatusException(UpstreamException):
    """Exception raised when the brand backend answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        url: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs,
    ) -> None:
        if message is None:
            message = f"API responded with status: {status_code}"
        super().__init__(message=message, url=url, **kwargs)
        self.status_code = status_code


class UpstreamResponseException(UpstreamException):
    """Exception raised when the brand backend body is not valid JSON."""

    def __init__(
        self,
        url: Optional[str] = None,
        message: str = "API response is not valid JSON",
        **kwargs,
    ) -> None:
        super().__init__(message=message, url=url, **kwargs)
