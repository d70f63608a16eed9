from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

SLUG_PATTERN = r"^[a-z0-9-]+$"
YEAR_PATTERN = r"^[0-9]{4}$"

Language = Literal["en", "ar"]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Slug = Annotated[str, StringConstraints(pattern=SLUG_PATTERN)]
Year = Annotated[str, StringConstraints(pattern=YEAR_PATTERN)]


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class BilingualText(BaseModel):
    en: RequiredText
    ar: RequiredText


class BilingualList(BaseModel):
    """Ordered values kept per language; the two sequences are independent."""

    en: list[str] = Field(default_factory=list)
    ar: list[str] = Field(default_factory=list)

    def add(self, lang: Language, value: str) -> "BilingualList":
        value = value.strip()
        if not value:
            return self
        items = [*getattr(self, lang), value]
        return self.model_copy(update={lang: items})

    def remove(self, lang: Language, index: int) -> "BilingualList":
        current = getattr(self, lang)
        if not 0 <= index < len(current):
            return self
        items = [item for i, item in enumerate(current) if i != index]
        return self.model_copy(update={lang: items})


class BrandBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("website", "established", mode="before", check_fields=False)
    @classmethod
    def empty_string_is_unset(cls, v):
        return _blank_to_none(v)


class Brand(BrandBase):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    slug: str
    name: str
    website: Optional[str] = Field(default=None)
    established: Optional[str] = Field(default=None)
    origin: BilingualText
    description: BilingualText
    products: BilingualList = Field(default_factory=BilingualList)
    brand_advantages: BilingualList = Field(
        default_factory=BilingualList, alias="brandAdvantages"
    )
    logo: Optional[str] = Field(default=None)
    main_image: Optional[str] = Field(default=None, alias="mainImage")
    gallery_images: list[str] = Field(default_factory=list, alias="galleryImages")
    is_active: bool = Field(default=True, alias="isActive")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class BrandCreate(BrandBase):
    slug: Slug
    name: RequiredText
    website: Optional[str] = Field(default=None)
    established: Optional[Year] = Field(default=None)
    origin: BilingualText
    description: BilingualText
    products: BilingualList = Field(default_factory=BilingualList)
    brand_advantages: BilingualList = Field(
        default_factory=BilingualList, alias="brandAdvantages"
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# Used for both full (PUT) and partial (PATCH) updates; only set fields are sent.
class BrandUpdate(BrandBase):
    slug: Optional[Slug] = Field(default=None)
    name: Optional[RequiredText] = Field(default=None)
    website: Optional[str] = Field(default=None)
    established: Optional[Year] = Field(default=None)
    origin: Optional[BilingualText] = Field(default=None)
    description: Optional[BilingualText] = Field(default=None)
    products: Optional[BilingualList] = Field(default=None)
    brand_advantages: Optional[BilingualList] = Field(
        default=None, alias="brandAdvantages"
    )
    is_active: Optional[bool] = Field(default=None, alias="isActive")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class BrandFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    search: Optional[str] = Field(default=None)
    is_active: Optional[bool] = Field(default=None, alias="isActive")

    @field_validator("search", mode="before")
    @classmethod
    def empty_search_is_unset(cls, v):
        return _blank_to_none(v)

    def to_params(self) -> dict:
        """Query parameters with unset fields omitted rather than sent as null."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Pagination(BaseModel):
    current: int
    pages: int
    total: int
    limit: int


class BrandList(BaseModel):
    data: list[Brand]
    pagination: Pagination
