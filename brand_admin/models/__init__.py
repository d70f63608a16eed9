"""
Models module for Pydantic data models.

This module contains all Pydantic models used for request/response validation,
data serialization, and type safety throughout the application.
"""

from brand_admin.models.brand import (
    BilingualList,
    BilingualText,
    Brand,
    BrandCreate,
    BrandFilter,
    BrandList,
    BrandUpdate,
    Pagination,
)
from brand_admin.models.errors import ErrorEnvelope, HTTPDetail, HTTPException
from brand_admin.models.upload import BrandImages, ImageFile

__all__ = [
    # Error models
    "ErrorEnvelope",
    "HTTPDetail",
    "HTTPException",
    # Brand models
    "BilingualList",
    "BilingualText",
    "Brand",
    "BrandCreate",
    "BrandUpdate",
    "BrandFilter",
    "BrandList",
    "Pagination",
    # Upload models
    "BrandImages",
    "ImageFile",
]
