"""
Multipart payload models shared by the client API wrapper and the admin pages.
"""

from base64 import b64encode
from json import dumps
from typing import Optional, Union

from pydantic import BaseModel, Field, InstanceOf

from brand_admin.models.brand import BrandCreate, BrandUpdate

# httpx multipart part: (field name, (filename or None, content, content type))
Part = tuple[str, tuple[Optional[str], bytes, Optional[str]]]


def field_part(name: str, value: str) -> Part:
    """Plain form field sent as a multipart part without a filename."""
    return (name, (None, value.encode("utf-8"), None))


class ImageFile(BaseModel):
    filename: str
    content: bytes
    content_type: str = Field(default="application/octet-stream")

    def as_part(self) -> tuple[str, bytes, str]:
        """File tuple in the shape httpx expects for multipart parts."""
        return (self.filename, self.content, self.content_type)

    def preview_url(self) -> str:
        """Inline data URL used to preview a selected image before upload."""
        encoded = b64encode(self.content).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


class BrandImages(BaseModel):
    """
    Brand fields plus the image files sent with them.

    Encoded as a JSON ``brandData`` field with optional ``logo`` and
    ``mainImage`` parts and one ``galleryImages`` part per gallery file.
    A plain dict is sent as given, unknown keys included.
    """

    brand_data: Union[InstanceOf[BrandCreate], InstanceOf[BrandUpdate], dict]
    logo: Optional[ImageFile] = Field(default=None)
    main_image: Optional[ImageFile] = Field(default=None)
    gallery_images: list[ImageFile] = Field(default_factory=list)

    @property
    def has_files(self) -> bool:
        return bool(self.logo or self.main_image or self.gallery_images)

    def payload(self) -> dict:
        if isinstance(self.brand_data, dict):
            return self.brand_data
        return self.brand_data.to_payload()

    def to_multipart(self) -> list[Part]:
        """
        Every field as a multipart part, so the body stays multipart even
        when no image is attached.
        """
        parts = [field_part("brandData", dumps(self.payload(), ensure_ascii=False))]
        if self.logo:
            parts.append(("logo", self.logo.as_part()))
        if self.main_image:
            parts.append(("mainImage", self.main_image.as_part()))
        for image in self.gallery_images:
            parts.append(("galleryImages", image.as_part()))
        return parts
