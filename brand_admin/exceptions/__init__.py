"""
Exceptions module for custom application exceptions.

This module contains all custom exception classes that extend from AppException
and are used throughout the application for error handling.
"""

from brand_admin.exceptions.app import AppException, ErrorTypes
from brand_admin.exceptions.brand import BrandValidationException
from brand_admin.exceptions.client import ClientAPIException
from brand_admin.exceptions.upstream import (
    UpstreamException,
    UpstreamResponseException,
    UpstreamStatusException,
)

__all__ = [
    # Base exceptions
    "AppException",
    "ErrorTypes",
    # Brand exceptions
    "BrandValidationException",
    # Client API exceptions
    "ClientAPIException",
    # Upstream exceptions
    "UpstreamException",
    "UpstreamResponseException",
    "UpstreamStatusException",
]
