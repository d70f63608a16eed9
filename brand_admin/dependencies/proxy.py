from typing import Annotated
from fastapi import Depends
from brand_admin.service.proxy import ProxyService
from brand_admin.dependencies.common import UpstreamDep

def get_proxy_service(upstream: UpstreamDep) -> ProxyService:
    return ProxyService(upstream)

ProxyServiceDep = Annotated[ProxyService, Depends(get_proxy_service)]
