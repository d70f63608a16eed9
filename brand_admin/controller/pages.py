"""
Admin pages for listing, creating, editing and deleting brands.

Pages talk to the backend only through the client API wrapper. Failures are
shown as a one-line notice; the form keeps whatever the user entered so the
submit can be retried.
"""

from typing import Annotated, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import ValidationError
import structlog

from brand_admin.dependencies import BrandAPIDep, SettingsDep
from brand_admin.exceptions.brand import BrandValidationException
from brand_admin.exceptions.client import ClientAPIException
from brand_admin.forms import BrandForm
from brand_admin.guard import InFlightGuard, get_action_guard
from brand_admin.models.brand import BrandFilter, Pagination

logger = structlog.get_logger(__name__)

templates = Environment(
    loader=PackageLoader("brand_admin", "templates"),
    autoescape=select_autoescape(["html"]),
)

GuardDep = Annotated[InFlightGuard, Depends(get_action_guard)]
BrandIdPath = Annotated[str, Path(description="Brand ID")]

router = APIRouter(tags=["Pages"], include_in_schema=False)


def render(name: str, status_code: int = status.HTTP_200_OK, **context) -> HTMLResponse:
    content = templates.get_template(name).render(**context)
    return HTMLResponse(content=content, status_code=status_code)


def redirect_to_list(
    notice: Optional[str] = None,
    error: Optional[str] = None,
    page: Optional[str] = None,
    search: Optional[str] = None,
) -> RedirectResponse:
    params = {
        key: value
        for key, value in (
            ("page", page),
            ("search", search),
            ("notice", notice),
            ("error", error),
        )
        if value
    }
    url = f"/?{urlencode(params)}" if params else "/"
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


def _submit_error(e: Exception, fallback: str) -> str:
    if isinstance(e, ClientAPIException) and e.error:
        return e.error
    return fallback


@router.get("/", response_class=HTMLResponse)
async def brand_list(
    api: BrandAPIDep,
    settings: SettingsDep,
    page: Annotated[int, Query(ge=1)] = 1,
    search: str = "",
    notice: Optional[str] = None,
    error: Optional[str] = None,
):
    limit = settings.CLIENT.PAGE_SIZE
    brands = []
    pagination = Pagination(current=1, pages=1, total=0, limit=limit)
    try:
        result = await api.get_brands(
            BrandFilter(page=page, limit=limit, search=search, is_active=True)
        )
        brands, pagination = result.data, result.pagination
    except (ClientAPIException, ValidationError) as e:
        logger.error("Error fetching brands", error=str(e))
        error = "Failed to fetch brands"

    return render(
        "list.html",
        title="Brand Management",
        brands=brands,
        pagination=pagination,
        search=search,
        notice=notice,
        error=error,
    )


@router.get("/create-brand", response_class=HTMLResponse)
async def create_brand_page():
    return render("form.html", title="Create New Brand", mode="create", form=BrandForm(), errors={})


@router.post("/create-brand", response_class=HTMLResponse)
async def create_brand_submit(request: Request, api: BrandAPIDep):
    form_data = await request.form()
    form = await BrandForm.from_form_data(form_data)
    context = {"title": "Create New Brand", "mode": "create"}

    action = form_data.get("action")
    if isinstance(action, str) and action and action != "submit":
        return render("form.html", form=form.apply_action(action, form_data), errors={}, **context)

    try:
        brand_data = form.to_create()
    except BrandValidationException as e:
        return render(
            "form.html",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            form=form,
            errors=e.errors,
            **context,
        )

    try:
        images = form.images(brand_data)
        if images.has_files:
            brand = await api.create_brand_with_images(images)
        else:
            brand = await api.create_brand(brand_data)
    except (ClientAPIException, ValidationError) as e:
        logger.error("Failed to create brand", slug=form.slug, error=str(e))
        return render(
            "form.html",
            form=form,
            errors={},
            error=_submit_error(e, "Failed to create brand"),
            **context,
        )

    logger.info("Brand created", brand_id=brand.id, slug=brand.slug)
    return redirect_to_list(notice="Brand created successfully")


@router.get("/brands/{brand_id}/edit", response_class=HTMLResponse)
async def edit_brand_page(brand_id: BrandIdPath, api: BrandAPIDep):
    try:
        brand = await api.get_brand(brand_id)
    except (ClientAPIException, ValidationError) as e:
        logger.error("Failed to load brand for editing", brand_id=brand_id, error=str(e))
        return redirect_to_list(error="Failed to fetch brand")

    return render(
        "form.html",
        title=f"Edit {brand.name}",
        mode="edit",
        brand=brand,
        brand_id=brand_id,
        form=BrandForm.from_brand(brand),
        errors={},
    )


@router.post("/brands/{brand_id}/edit", response_class=HTMLResponse)
async def edit_brand_submit(brand_id: BrandIdPath, request: Request, api: BrandAPIDep):
    form_data = await request.form()
    form = await BrandForm.from_form_data(form_data)
    context = {"title": "Edit Brand", "mode": "edit", "brand_id": brand_id}

    action = form_data.get("action")
    if isinstance(action, str) and action and action != "submit":
        return render("form.html", form=form.apply_action(action, form_data), errors={}, **context)

    try:
        brand_data = form.to_update()
    except BrandValidationException as e:
        return render(
            "form.html",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            form=form,
            errors=e.errors,
            **context,
        )

    try:
        images = form.images(brand_data)
        if images.has_files:
            await api.update_brand_with_images(brand_id, images)
        else:
            await api.patch_brand(brand_id, brand_data)
    except (ClientAPIException, ValidationError) as e:
        logger.error("Failed to update brand", brand_id=brand_id, error=str(e))
        return render(
            "form.html",
            form=form,
            errors={},
            error=_submit_error(e, "Failed to update brand"),
            **context,
        )

    return redirect_to_list(notice="Brand updated successfully")


async def _destructive_action(
    request: Request,
    guard: InFlightGuard,
    action: str,
    brand_id: str,
    call,
    success: str,
    failure: str,
) -> RedirectResponse:
    form_data = await request.form()
    page = form_data.get("page")
    search = form_data.get("search")
    back = {
        "page": page if isinstance(page, str) else None,
        "search": search if isinstance(search, str) else None,
    }

    async with guard.acquire(action, brand_id) as proceed:
        if not proceed:
            return redirect_to_list(notice="Action already in progress", **back)
        try:
            await call(brand_id)
        except ClientAPIException as e:
            logger.error(f"Failed to {action} brand", brand_id=brand_id, error=str(e))
            return redirect_to_list(error=failure, **back)

    logger.info(f"Brand {action} completed", brand_id=brand_id)
    return redirect_to_list(notice=success, **back)


@router.post("/brands/{brand_id}/delete")
async def delete_brand(
    brand_id: BrandIdPath, request: Request, api: BrandAPIDep, guard: GuardDep
):
    return await _destructive_action(
        request,
        guard,
        "delete",
        brand_id,
        api.delete_brand,
        success="Brand deleted successfully",
        failure="Failed to delete brand",
    )


@router.post("/brands/{brand_id}/hard-delete")
async def hard_delete_brand(
    brand_id: BrandIdPath, request: Request, api: BrandAPIDep, guard: GuardDep
):
    return await _destructive_action(
        request,
        guard,
        "hard-delete",
        brand_id,
        api.hard_delete_brand,
        success="Brand permanently deleted",
        failure="Failed to permanently delete brand",
    )
