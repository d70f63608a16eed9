"""
Form state for the create and edit pages.

The form is validated field by field before any network call. Products and
advantages live in one BilingualList each; form actions (``add:products:en``,
``remove:brandAdvantages:ar:1``) return a new form with the updated list.
Selected images travel back to the browser as data URLs so they can be
previewed and resubmitted after a re-render.
"""

from base64 import b64decode
from binascii import Error as Base64Error
import re
from typing import Optional

import structlog
from pydantic import BaseModel, Field
from starlette.datastructures import FormData, UploadFile

from brand_admin.exceptions.brand import BrandValidationException
from brand_admin.models.brand import (
    SLUG_PATTERN,
    YEAR_PATTERN,
    BilingualList,
    Brand,
    BrandCreate,
    BrandUpdate,
)
from brand_admin.models.upload import BrandImages, ImageFile

logger = structlog.get_logger(__name__)

LIST_FIELDS = ("products", "brandAdvantages")
LANGUAGES = ("en", "ar")

_DATA_URL = re.compile(r"^data:(?P<type>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.S)


class FormText(BaseModel):
    en: str = ""
    ar: str = ""


class BrandForm(BaseModel):
    slug: str = ""
    name: str = ""
    website: str = ""
    established: str = ""
    origin: FormText = Field(default_factory=FormText)
    description: FormText = Field(default_factory=FormText)
    products: BilingualList = Field(default_factory=BilingualList)
    brand_advantages: BilingualList = Field(default_factory=BilingualList)
    logo: Optional[ImageFile] = Field(default=None)
    main_image: Optional[ImageFile] = Field(default=None)
    gallery_images: list[ImageFile] = Field(default_factory=list)

    @classmethod
    def from_brand(cls, brand: Brand) -> "BrandForm":
        return cls(
            slug=brand.slug,
            name=brand.name,
            website=brand.website or "",
            established=brand.established or "",
            origin=FormText(en=brand.origin.en, ar=brand.origin.ar),
            description=FormText(en=brand.description.en, ar=brand.description.ar),
            products=brand.products,
            brand_advantages=brand.brand_advantages,
        )

    @classmethod
    async def from_form_data(cls, form: FormData) -> "BrandForm":
        def text(key: str) -> str:
            value = form.get(key)
            return value.strip() if isinstance(value, str) else ""

        def values(key: str) -> list[str]:
            return [v for v in form.getlist(key) if isinstance(v, str) and v.strip()]

        return cls(
            slug=text("slug"),
            name=text("name"),
            website=text("website"),
            established=text("established"),
            origin=FormText(en=text("origin.en"), ar=text("origin.ar")),
            description=FormText(en=text("description.en"), ar=text("description.ar")),
            products=BilingualList(en=values("products.en"), ar=values("products.ar")),
            brand_advantages=BilingualList(
                en=values("brandAdvantages.en"), ar=values("brandAdvantages.ar")
            ),
            logo=await _single_image(form, "logo"),
            main_image=await _single_image(form, "mainImage"),
            gallery_images=await _gallery_images(form, "galleryImages"),
        )

    def list_for(self, field: str) -> BilingualList:
        return self.products if field == "products" else self.brand_advantages

    def _with_list(self, field: str, items: BilingualList) -> "BrandForm":
        key = "products" if field == "products" else "brand_advantages"
        return self.model_copy(update={key: items})

    def apply_action(self, action: str, form: FormData) -> "BrandForm":
        """
        Apply an ``add:<field>:<lang>`` or ``remove:<field>:<lang>:<index>``
        action. Unknown actions leave the form unchanged.
        """
        parts = action.split(":")
        if len(parts) < 3 or parts[1] not in LIST_FIELDS or parts[2] not in LANGUAGES:
            logger.warning("Ignoring unknown form action", action=action)
            return self
        verb, field, lang = parts[0], parts[1], parts[2]
        items = self.list_for(field)
        if verb == "add":
            value = form.get(f"new.{field}.{lang}")
            return self._with_list(field, items.add(lang, value if isinstance(value, str) else ""))
        if verb == "remove" and len(parts) == 4 and parts[3].isdigit():
            return self._with_list(field, items.remove(lang, int(parts[3])))
        logger.warning("Ignoring unknown form action", action=action)
        return self

    def validate_fields(self) -> dict[str, str]:
        """Field path to message for every rule the form breaks."""
        errors: dict[str, str] = {}
        if not self.name:
            errors["name"] = "Brand name is required"
        if not self.slug:
            errors["slug"] = "Slug is required"
        elif not re.match(SLUG_PATTERN, self.slug):
            errors["slug"] = "Slug can only contain lowercase letters, numbers, and hyphens"
        if self.established and not re.match(YEAR_PATTERN, self.established):
            errors["established"] = "Established year must be a 4-digit year"
        if not self.origin.en:
            errors["origin.en"] = "English origin is required"
        if not self.origin.ar:
            errors["origin.ar"] = "Arabic origin is required"
        if not self.description.en:
            errors["description.en"] = "English description is required"
        if not self.description.ar:
            errors["description.ar"] = "Arabic description is required"
        return errors

    def _brand_fields(self) -> dict:
        errors = self.validate_fields()
        if errors:
            raise BrandValidationException(errors)
        return {
            "slug": self.slug,
            "name": self.name,
            "website": self.website,
            "established": self.established,
            "origin": self.origin.model_dump(),
            "description": self.description.model_dump(),
            "products": self.products,
            "brand_advantages": self.brand_advantages,
        }

    def to_create(self) -> BrandCreate:
        """
        Raises:
            BrandValidationException: If any field rule is broken
        """
        return BrandCreate(**self._brand_fields())

    def to_update(self) -> BrandUpdate:
        """
        Raises:
            BrandValidationException: If any field rule is broken
        """
        fields = self._brand_fields()
        # Cleared optional fields are sent explicitly so the backend unsets them.
        return BrandUpdate(
            **{k: v for k, v in fields.items() if k not in ("website", "established")},
            website=self.website or None,
            established=self.established or None,
        )

    def images(self, brand_data) -> BrandImages:
        return BrandImages(
            brand_data=brand_data,
            logo=self.logo,
            main_image=self.main_image,
            gallery_images=self.gallery_images,
        )


def image_from_data_url(data_url: str, filename: str) -> Optional[ImageFile]:
    match = _DATA_URL.match(data_url or "")
    if match is None:
        return None
    try:
        content = b64decode(match.group("data"), validate=True)
    except (Base64Error, ValueError):
        logger.warning("Discarding malformed image preview", filename=filename)
        return None
    return ImageFile(
        filename=filename or "image",
        content=content,
        content_type=match.group("type"),
    )


async def _read_upload(value) -> Optional[ImageFile]:
    if not isinstance(value, UploadFile) or not value.filename:
        return None
    content = await value.read()
    if not content:
        return None
    return ImageFile(
        filename=value.filename,
        content=content,
        content_type=value.content_type or "application/octet-stream",
    )


async def _single_image(form: FormData, key: str) -> Optional[ImageFile]:
    image = await _read_upload(form.get(key))
    if image is not None:
        return image
    preview = form.get(f"{key}.preview")
    name = form.get(f"{key}.filename")
    if isinstance(preview, str) and preview:
        return image_from_data_url(preview, name if isinstance(name, str) else "")
    return None


async def _gallery_images(form: FormData, key: str) -> list[ImageFile]:
    uploaded = [await _read_upload(value) for value in form.getlist(key)]
    images = [image for image in uploaded if image is not None]
    if images:
        return images
    previews = form.getlist(f"{key}.preview")
    names = form.getlist(f"{key}.filename")
    kept = []
    for index, preview in enumerate(previews):
        name = names[index] if index < len(names) else ""
        image = image_from_data_url(preview, name if isinstance(name, str) else "")
        if image is not None:
            kept.append(image)
    return kept
