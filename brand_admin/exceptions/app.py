from enum import StrEnum
from typing import Any, Optional

from brand_admin.models.errors import HTTPDetail


class ErrorTypes(StrEnum):
    InputValidationError = "VALIDATION_ERROR"
    ResourceNotFound = "RESOURCE_NOT_FOUND"
    InvalidOperation = "INVALID_OPERATION"
    ExternalServiceError = "EXTERNAL_SERVICE_ERROR"
    InternalError = "INTERNAL_ERROR"
    UnknownError = "UNKNOWN_ERROR"


class AppException(Exception):
    """
    Base class for brand admin errors.

    ``resource`` names what failed (``brand``, ``upstream``, a client path)
    and ``value`` the offending input or URL; extra keyword arguments are
    kept on ``context`` for logging.
    """

    def __init__(
        self,
        type: ErrorTypes,
        message: str,
        resource: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs,
    ) -> None:
        super().__init__(message)
        self.type = type
        self.message = message
        self.resource = resource
        self.field = field
        self.value = value
        self.context = kwargs

    def __str__(self) -> str:
        return f"{self.type}: {self.message}"

    def to_detail(self) -> HTTPDetail:
        return HTTPDetail(
            type=self.type,
            message=self.message,
            resource=self.resource,
            field=self.field,
            value=self.value,
        )
