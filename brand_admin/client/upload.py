"""
File upload API functions, independent of the brand entity.
"""

from typing import Iterable

from brand_admin.client.base import APIClient
from brand_admin.models.upload import ImageFile, field_part


class UploadAPI(APIClient):
    async def upload_single(self, file: ImageFile, destination: str) -> dict:
        """Upload one image under the ``destination`` tag."""
        return await self._request(
            "POST",
            "/upload",
            files=[field_part("destination", destination), ("image", file.as_part())],
        )

    async def upload_multiple(
        self, files: Iterable[ImageFile], destination: str
    ) -> dict:
        """Upload several images in one request, one ``images`` part per file."""
        parts = [field_part("destination", destination)]
        parts.extend(("images", file.as_part()) for file in files)
        return await self._request("POST", "/upload-multiple", files=parts)
