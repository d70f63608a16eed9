"""
Brand API functions.

Maps each logical brand operation to one call against the proxy routes so
that page handlers never build raw requests.
"""

from typing import Optional, Union
from urllib.parse import quote

from brand_admin.client.base import APIClient
from brand_admin.models.brand import (
    Brand,
    BrandCreate,
    BrandFilter,
    BrandList,
    BrandUpdate,
)
from brand_admin.models.upload import BrandImages


def _payload(brand_data: Union[BrandCreate, BrandUpdate, dict]) -> dict:
    if isinstance(brand_data, dict):
        return brand_data
    return brand_data.to_payload()


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class BrandAPI(APIClient):
    # Get all brands with pagination and filtering
    async def get_brands(self, filter: Optional[BrandFilter] = None) -> BrandList:
        params = filter.to_params() if filter else {}
        body = await self._request("GET", "/brands", params=params)
        return BrandList.model_validate(body)

    # Get single brand by ID or slug
    async def get_brand(self, identifier: str) -> Brand:
        body = await self._request("GET", f"/brands/{_segment(identifier)}")
        return Brand.model_validate(body)

    # Create brand (JSON only)
    async def create_brand(self, brand_data: Union[BrandCreate, dict]) -> Brand:
        body = await self._request("POST", "/brands", json=_payload(brand_data))
        return Brand.model_validate(body)

    async def create_brand_with_images(self, form: BrandImages) -> Brand:
        body = await self._request(
            "POST", "/brands/with-images", files=form.to_multipart()
        )
        return Brand.model_validate(body)

    # Update brand (full update)
    async def update_brand(
        self, id: str, brand_data: Union[BrandCreate, BrandUpdate, dict]
    ) -> Brand:
        body = await self._request(
            "PUT", f"/brands/{_segment(id)}", json=_payload(brand_data)
        )
        return Brand.model_validate(body)

    # Partial update brand
    async def patch_brand(
        self, id: str, brand_data: Union[BrandUpdate, dict]
    ) -> Brand:
        body = await self._request(
            "PATCH", f"/brands/{_segment(id)}", json=_payload(brand_data)
        )
        return Brand.model_validate(body)

    async def update_brand_with_images(self, id: str, form: BrandImages) -> Brand:
        body = await self._request(
            "PATCH",
            f"/brands/{_segment(id)}/with-images",
            files=form.to_multipart(),
        )
        return Brand.model_validate(body)

    # Soft delete brand
    async def delete_brand(self, id: str) -> dict:
        return await self._request("DELETE", f"/brands/{_segment(id)}")

    # Hard delete brand
    async def hard_delete_brand(self, id: str) -> dict:
        return await self._request("DELETE", f"/brands/{_segment(id)}/hard")
