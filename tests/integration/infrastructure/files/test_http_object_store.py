import json

import httpx
import pytest

from sitesmith.backend.app.domain.files.errors import ObjectNotFound, ObjectStoreError
from sitesmith.backend.app.infrastructure.files.http_object_store import HttpObjectStore

pytestmark = pytest.mark.asyncio

BASE = "https://storage.example"


def make_store(handler) -> HttpObjectStore:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpObjectStore(base_url=BASE, api_key="k", bucket="sites", client=client)


async def test_put_uploads_with_upsert_and_encoded_key():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"Key": "ok"})

    store = make_store(handler)
    await store.put("website/a.example/assets/Hero Shot.webp", b"img", "image/webp")

    req = seen[0]
    assert req.method == "POST"
    assert req.url.raw_path.decode() == "/storage/v1/object/sites/website/a.example/assets/Hero%20Shot.webp"
    assert req.headers["x-upsert"] == "true"
    assert req.headers["content-type"] == "image/webp"
    assert req.headers["authorization"] == "Bearer k"
    assert req.content == b"img"


async def test_put_failure_raises():
    store = make_store(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(ObjectStoreError):
        await store.put("website/a.example/index.html", b"x", "text/html")


async def test_transport_error_raises_store_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ObjectStoreError):
        await make_store(handler).put("website/a.example/index.html", b"x", "text/html")


async def test_get_missing_object():
    store = make_store(lambda request: httpx.Response(404))
    with pytest.raises(ObjectNotFound):
        await store.get("website/a.example/index.html")


async def test_delete_treats_missing_as_deleted():
    store = make_store(lambda request: httpx.Response(404))
    await store.delete("website/a.example/index.html")


async def test_list_walks_folders():
    listings = {
        "website/a.example": [
            {"name": "index.html", "id": "1"},
            {"name": "assets", "id": None},
        ],
        "website/a.example/assets": [
            {"name": "hero.webp", "id": "2"},
        ],
    }

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(200, json=listings.get(body["prefix"], []))

    keys = await make_store(handler).list("website/a.example/")

    assert keys == ["website/a.example/assets/hero.webp", "website/a.example/index.html"]


def test_requires_credentials():
    with pytest.raises(ValueError):
        HttpObjectStore(base_url="", api_key="", bucket="sites")
