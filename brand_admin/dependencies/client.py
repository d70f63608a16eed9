from typing import Annotated, AsyncIterator
from fastapi import Depends
from brand_admin.client import BrandAPI
from brand_admin.dependencies.common import SettingsDep

async def get_brand_api(settings: SettingsDep) -> AsyncIterator[BrandAPI]:
    async with BrandAPI(
        base_url=settings.CLIENT.BASE_URL,
        timeout=settings.CLIENT.TIMEOUT,
    ) as api:
        yield api

BrandAPIDep = Annotated[BrandAPI, Depends(get_brand_api)]
