"""
Brand proxy router.

This module exposes the brand resource paths of the backend under the local
origin. Each route forwards the inbound request unchanged and relays the JSON
response, adding permissive CORS headers and answering OPTIONS locally.
"""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Path, Request
from brand_admin.controller.common import preflight, relay
from brand_admin.dependencies import ProxyServiceDep, SettingsDep
from brand_admin.models.errors import ErrorEnvelope

BRAND_ERROR = "Failed to fetch data from API"

COLLECTION_METHODS = ("GET", "POST")
WITH_IMAGES_METHODS = ("POST",)
ITEM_METHODS = ("GET", "PUT", "PATCH", "DELETE")
ITEM_WITH_IMAGES_METHODS = ("PATCH",)
HARD_DELETE_METHODS = ("DELETE",)

BrandIdPath = Annotated[str, Path(description="Brand ID or slug")]

router = APIRouter(
    prefix="/brands",
    tags=["Brands"],
    responses={
        500: {"model": ErrorEnvelope, "description": "Upstream request failed"},
    },
)


def _item_path(brand_id: str, suffix: str = "") -> str:
    return f"/api/brands/{quote(brand_id, safe='')}{suffix}"


@router.api_route(
    "/with-images",
    methods=list(WITH_IMAGES_METHODS),
    summary="Create a brand with images",
    description="Relay a multipart body (brandData JSON field plus logo, mainImage and galleryImages parts)",
)
async def create_brand_with_images(
    request: Request,
    proxy: ProxyServiceDep,
    settings: SettingsDep,
):
    return await relay(
        proxy.forward(request, "/api/brands/with-images"),
        settings=settings,
        methods=WITH_IMAGES_METHODS,
        error_message=BRAND_ERROR,
    )


@router.options("/with-images", include_in_schema=False)
async def create_brand_with_images_options(settings: SettingsDep):
    return preflight(settings, WITH_IMAGES_METHODS)


@router.api_route(
    "",
    methods=list(COLLECTION_METHODS),
    summary="List or create brands",
    description="GET lists brands (page, limit, search, isActive pass through); POST creates one from JSON",
)
async def brands_collection(
    request: Request,
    proxy: ProxyServiceDep,
    settings: SettingsDep,
):
    return await relay(
        proxy.forward(request, "/api/brands"),
        settings=settings,
        methods=COLLECTION_METHODS,
        error_message=BRAND_ERROR,
    )


@router.options("", include_in_schema=False)
async def brands_collection_options(settings: SettingsDep):
    return preflight(settings, COLLECTION_METHODS)


@router.api_route(
    "/{brand_id}",
    methods=list(ITEM_METHODS),
    summary="Get, replace, update or soft delete a brand",
)
async def brand_item(
    brand_id: BrandIdPath,
    request: Request,
    proxy: ProxyServiceDep,
    settings: SettingsDep,
):
    return await relay(
        proxy.forward(request, _item_path(brand_id)),
        settings=settings,
        methods=ITEM_METHODS,
        error_message=BRAND_ERROR,
    )


@router.options("/{brand_id}", include_in_schema=False)
async def brand_item_options(brand_id: BrandIdPath, settings: SettingsDep):
    return preflight(settings, ITEM_METHODS)


@router.api_route(
    "/{brand_id}/with-images",
    methods=list(ITEM_WITH_IMAGES_METHODS),
    summary="Update a brand and replace its images",
)
async def update_brand_with_images(
    brand_id: BrandIdPath,
    request: Request,
    proxy: ProxyServiceDep,
    settings: SettingsDep,
):
    return await relay(
        proxy.forward(request, _item_path(brand_id, "/with-images")),
        settings=settings,
        methods=ITEM_WITH_IMAGES_METHODS,
        error_message=BRAND_ERROR,
    )


@router.options("/{brand_id}/with-images", include_in_schema=False)
async def update_brand_with_images_options(
    brand_id: BrandIdPath, settings: SettingsDep
):
    return preflight(settings, ITEM_WITH_IMAGES_METHODS)


@router.api_route(
    "/{brand_id}/hard",
    methods=list(HARD_DELETE_METHODS),
    summary="Permanently delete a brand",
)
async def hard_delete_brand(
    brand_id: BrandIdPath,
    request: Request,
    proxy: ProxyServiceDep,
    settings: SettingsDep,
):
    return await relay(
        proxy.forward(request, _item_path(brand_id, "/hard")),
        settings=settings,
        methods=HARD_DELETE_METHODS,
        error_message=BRAND_ERROR,
    )


@router.options("/{brand_id}/hard", include_in_schema=False)
async def hard_delete_brand_options(brand_id: BrandIdPath, settings: SettingsDep):
    return preflight(settings, HARD_DELETE_METHODS)
