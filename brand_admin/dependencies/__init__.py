from brand_admin.dependencies.client import BrandAPIDep, get_brand_api
from brand_admin.dependencies.common import SettingsDep, UpstreamDep
from brand_admin.dependencies.proxy import ProxyServiceDep, get_proxy_service

__all__ = [
    "BrandAPIDep",
    "ProxyServiceDep",
    "SettingsDep",
    "UpstreamDep",
    "get_brand_api",
    "get_proxy_service",
]
