# tests/conftest.py
import json
from datetime import datetime, timezone
from math import ceil
from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from brand_admin.app import app
from brand_admin.client import BrandAPI, UploadAPI
from brand_admin.dependencies.client import get_brand_api
from brand_admin.settings import Settings, get_settings
from brand_admin.settings.upstream import UpstreamConfig
from brand_admin.upstream import close_upstream, init_upstream

UPSTREAM_URL = "http://backend.test"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class FakeBrandBackend:
    """
    In-memory stand-in for the brand backend, served through httpx.MockTransport.

    Every request is recorded so tests can assert what reached the upstream.
    Set ``down`` to simulate a network failure, ``fail_with`` to force an
    error status on every call, or ``raw_body`` to answer with a non-JSON body.
    """

    def __init__(self) -> None:
        self.brands: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self.down = False
        self.fail_with: Optional[int] = None
        self.raw_body: Optional[bytes] = None
        self._next_id = 1

    def add_brand(self, **fields) -> dict:
        brand_id = f"b{self._next_id}"
        self._next_id += 1
        brand = {
            "_id": brand_id,
            "slug": fields.pop("slug", brand_id),
            "name": fields.pop("name", f"Brand {brand_id}"),
            "origin": {"en": "Germany", "ar": "ألمانيا"},
            "description": {"en": "Quality plastics", "ar": "بلاستيك عالي الجودة"},
            "products": {"en": [], "ar": []},
            "brandAdvantages": {"en": [], "ar": []},
            "galleryImages": [],
            "isActive": True,
            "createdAt": _now(),
            "updatedAt": _now(),
        }
        brand.update(fields)
        self.brands[brand_id] = brand
        return brand

    def find(self, identifier: str) -> Optional[dict]:
        if identifier in self.brands:
            return self.brands[identifier]
        for brand in self.brands.values():
            if brand["slug"] == identifier:
                return brand
        return None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("Connection refused", request=request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"message": "upstream failure"})
        if self.raw_body is not None:
            return httpx.Response(200, content=self.raw_body)

        parts = request.url.path.strip("/").split("/")
        method = request.method
        if parts[:2] != ["api", "brands"] and parts[:1] == ["api"]:
            return self._upload(request, parts[1])
        if parts == ["api", "brands"]:
            if method == "GET":
                return self._list(request)
            if method == "POST":
                return self._create(json.loads(request.content))
        if parts == ["api", "brands", "with-images"] and method == "POST":
            return self._create_with_images(request)
        if len(parts) >= 3:
            brand = self.find(parts[2])
            if brand is None:
                return httpx.Response(404, json={"message": "Brand not found"})
            suffix = parts[3:]
            if suffix == ["hard"] and method == "DELETE":
                del self.brands[brand["_id"]]
                return httpx.Response(200, json={"message": "Brand permanently deleted"})
            if suffix == ["with-images"] and method == "PATCH":
                brand["logo"] = "/uploads/brands/logo.png"
                brand["updatedAt"] = _now()
                return httpx.Response(200, json=brand)
            if not suffix:
                return self._item(request, brand)
        return httpx.Response(405, json={"message": "Method not allowed"})

    def _list(self, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        page = int(params.get("page", 1))
        limit = int(params.get("limit", 10))
        items = list(self.brands.values())
        if "isActive" in params:
            wanted = params["isActive"] == "true"
            items = [b for b in items if b["isActive"] == wanted]
        if params.get("search"):
            term = params["search"].lower()
            items = [
                b for b in items if term in b["name"].lower() or term in b["slug"]
            ]
        start = (page - 1) * limit
        return httpx.Response(
            200,
            json={
                "data": items[start : start + limit],
                "pagination": {
                    "current": page,
                    "pages": max(ceil(len(items) / limit), 1),
                    "total": len(items),
                    "limit": limit,
                },
            },
        )

    def _create(self, payload: dict) -> httpx.Response:
        if self.find(payload.get("slug", "")) is not None:
            return httpx.Response(400, json={"message": "Slug already exists"})
        brand = self.add_brand(**payload)
        return httpx.Response(201, json=brand)

    def _create_with_images(self, request: httpx.Request) -> httpx.Response:
        body = request.content
        if b'name="brandData"' not in body:
            return httpx.Response(400, json={"message": "brandData is required"})
        brand = self.add_brand(
            slug=f"with-images-{self._next_id}",
            logo="/uploads/brands/logo.png",
        )
        return httpx.Response(201, json=brand)

    def _item(self, request: httpx.Request, brand: dict) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(200, json=brand)
        if request.method in ("PUT", "PATCH"):
            brand.update(json.loads(request.content))
            brand["updatedAt"] = _now()
            return httpx.Response(200, json=brand)
        if request.method == "DELETE":
            brand["isActive"] = False
            return httpx.Response(200, json={"message": "Brand deactivated successfully"})
        return httpx.Response(405, json={"message": "Method not allowed"})

    def _upload(self, request: httpx.Request, endpoint: str) -> httpx.Response:
        if request.method != "POST":
            return httpx.Response(405, json={"message": "Method not allowed"})
        count = request.content.count(b"filename=")
        urls = [f"/uploads/{i}.png" for i in range(count)]
        if endpoint == "upload":
            return httpx.Response(200, json={"url": urls[0] if urls else None})
        return httpx.Response(200, json={"urls": urls, "count": count})


@pytest.fixture
def backend():
    return FakeBrandBackend()


@pytest.fixture
def settings():
    """Test settings; override UPSTREAM values per test through this object."""
    return Settings(UPSTREAM=UpstreamConfig(BASE_URL=UPSTREAM_URL), ENVIRONMENT="TEST")


@pytest.fixture
def test_client(backend, settings):
    """FastAPI test client whose upstream calls land on the fake backend."""
    init_upstream(settings.UPSTREAM, transport=httpx.MockTransport(backend.handler))
    app.dependency_overrides[get_settings] = lambda: settings

    async def override_brand_api():
        async with BrandAPI(
            base_url="http://testserver/api",
            transport=httpx.ASGITransport(app=app),
        ) as api:
            yield api

    app.dependency_overrides[get_brand_api] = override_brand_api

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def upstream(backend, settings):
    """Open the shared upstream client without running the app lifespan."""
    client = init_upstream(
        settings.UPSTREAM, transport=httpx.MockTransport(backend.handler)
    )
    await client.connect()
    app.dependency_overrides[get_settings] = lambda: settings
    yield client
    app.dependency_overrides.clear()
    await close_upstream()


@pytest.fixture
async def brand_api(upstream):
    """Client API wrapper calling the proxy routes in-process."""
    async with BrandAPI(
        base_url="http://testserver/api",
        transport=httpx.ASGITransport(app=app),
    ) as api:
        yield api


@pytest.fixture
async def upload_api(upstream):
    async with UploadAPI(
        base_url="http://testserver/api",
        transport=httpx.ASGITransport(app=app),
    ) as api:
        yield api
