"""
Upload proxy router.

Generic image upload endpoints. The inbound multipart form is parsed and
re-encoded for the backend rather than copied byte for byte.
"""

from fastapi import APIRouter, Request

from brand_admin.controller.common import preflight, relay
from brand_admin.dependencies import ProxyServiceDep, SettingsDep
from brand_admin.models.errors import ErrorEnvelope

UPLOAD_METHODS = ("POST",)

router = APIRouter(
    tags=["Uploads"],
    responses={
        500: {"model": ErrorEnvelope, "description": "Upstream upload failed"},
    },
)


@router.post(
    "/upload",
    summary="Upload a single image",
    description="Form fields: image (file), destination (storage tag)",
)
async def upload_single(
    request: Request,
    proxy: ProxyServiceDep,
    settings: SettingsDep,
):
    return await relay(
        proxy.forward_form(request, "/api/upload"),
        settings=settings,
        methods=UPLOAD_METHODS,
        error_message="Failed to upload file",
    )


@router.options("/upload", include_in_schema=False)
async def upload_single_options(settings: SettingsDep):
    return preflight(settings, UPLOAD_METHODS)


@router.post(
    "/upload-multiple",
    summary="Upload several images",
    description="Form fields: images (repeated file), destination (storage tag)",
)
async def upload_multiple(
    request: Request,
    proxy: ProxyServiceDep,
    settings: SettingsDep,
):
    return await relay(
        proxy.forward_form(request, "/api/upload-multiple"),
        settings=settings,
        methods=UPLOAD_METHODS,
        error_message="Failed to upload multiple files",
    )


@router.options("/upload-multiple", include_in_schema=False)
async def upload_multiple_options(settings: SettingsDep):
    return preflight(settings, UPLOAD_METHODS)
