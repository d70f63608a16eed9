"""
FastAPI dependencies for dependency injection.

This module contains reusable dependencies for FastAPI endpoints
including settings access and the shared upstream client.
"""

from typing import Annotated

from fastapi import Depends

from brand_admin.settings import Settings, get_settings
from brand_admin.upstream import UpstreamClient, get_upstream

# Type aliases for cleaner endpoint signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
UpstreamDep = Annotated[UpstreamClient, Depends(get_upstream)]
