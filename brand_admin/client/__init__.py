from brand_admin.client.base import APIClient
from brand_admin.client.brand import BrandAPI
from brand_admin.client.upload import UploadAPI

__all__ = ["APIClient", "BrandAPI", "UploadAPI"]
