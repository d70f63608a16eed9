"""
FastAPI exception handlers.

Proxy routes catch their own failures and answer with the error envelope;
these handlers cover everything else (page query validation, unknown
routes, bugs) with the structured HTTPException body.
"""
from typing import Optional, Union

import structlog
from fastapi import Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from brand_admin.exceptions.app import AppException, ErrorTypes
from brand_admin.models.errors import HTTPDetail
from brand_admin.models.errors import HTTPException as HTTPExceptionModel

logger = structlog.get_logger(__name__)

STATUS_FOR_TYPE = {
    ErrorTypes.InputValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorTypes.ResourceNotFound: status.HTTP_404_NOT_FOUND,
    ErrorTypes.InvalidOperation: status.HTTP_400_BAD_REQUEST,
    ErrorTypes.ExternalServiceError: status.HTTP_502_BAD_GATEWAY,
}

TITLES = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    502: "Bad Gateway",
}


def get_status_code_from_error_type(error_type: ErrorTypes) -> int:
    return STATUS_FOR_TYPE.get(error_type, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _respond(
    status_code: int,
    detail: str,
    errors: list[HTTPDetail],
    title: Optional[str] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = HTTPExceptionModel(
        status_code=status_code,
        title=title or TITLES.get(status_code, "Error"),
        detail=detail,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    status_code = get_status_code_from_error_type(exc.type)
    if status_code >= 500:
        logger.error(
            "Application error",
            error=exc.message,
            error_type=exc.type,
            resource=exc.resource,
        )
    return _respond(status_code, exc.message, [exc.to_detail()])


async def validation_exception_handler(
    request: Request, exc: Union[RequestValidationError, ValidationError]
) -> JSONResponse:
    """Handle Pydantic and FastAPI validation errors."""
    errors = [
        HTTPDetail(
            type=error.get("type", ErrorTypes.InputValidationError.value),
            message=error.get("msg", "Validation error"),
            field=".".join(str(loc) for loc in error.get("loc", [])) or None,
            value=error.get("input"),
        )
        for error in exc.errors()
    ]
    return _respond(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed",
        errors,
        title="Validation Error",
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        error_type = ErrorTypes.ResourceNotFound
    elif exc.status_code in (400, 405):
        error_type = ErrorTypes.InvalidOperation
    elif exc.status_code >= 500:
        error_type = ErrorTypes.InternalError
    else:
        error_type = ErrorTypes.UnknownError

    detail = HTTPDetail(type=error_type, message=str(exc.detail), resource=request.url.path)
    return _respond(exc.status_code, str(exc.detail), [detail], headers=exc.headers)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    detail = HTTPDetail(
        type=ErrorTypes.InternalError,
        message="An unexpected error occurred. Please try again later.",
        resource=request.url.path,
    )
    return _respond(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred", [detail]
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
