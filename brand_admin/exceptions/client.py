"""
Custom exceptions for the client API wrapper.
"""

from typing import Optional

from brand_admin.exceptions.app import AppException, ErrorTypes


class ClientAPIException(AppException):
    """Exception raised when a client API call does not succeed.

    ``status_code`` is ``None`` when no response was received at all.
    ``error`` and ``details`` are copied from the proxy's error envelope
    when the response carried one.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
        details: Optional[str] = None,
        path: Optional[str] = None,
        **kwargs,
    ) -> None:
        if status_code is not None and status_code < 500:
            error_type = (
                ErrorTypes.ResourceNotFound
                if status_code == 404
                else ErrorTypes.InvalidOperation
            )
        else:
            error_type = ErrorTypes.ExternalServiceError
        super().__init__(
            type=error_type,
            message=message,
            resource=path,
            value=details,
            **kwargs,
        )
        self.status_code = status_code
        self.error = error
        self.details = details
        self.path = path
