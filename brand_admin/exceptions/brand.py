"""
Custom exceptions for Brand operations.
"""

from typing import Any, Optional

from brand_admin.exceptions.app import AppException, ErrorTypes


class BrandValidationException(AppException):
    """Exception raised when a brand form fails validation.

    ``errors`` maps dotted field paths (``origin.en``) to the message shown
    next to that field.
    """

    def __init__(
        self,
        errors: dict[str, str],
        message: str = "Brand form failed validation",
        value: Optional[Any] = None,
        **kwargs,
    ) -> None:
        field = next(iter(errors), None)
        super().__init__(
            type=ErrorTypes.InputValidationError,
            message=message,
            resource="brand",
            field=field,
            value=value,
            **kwargs,
        )
        self.errors = errors
