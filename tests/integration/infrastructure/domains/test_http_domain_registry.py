import json

import httpx
import pytest

from sitesmith.backend.app.domain.domains.errors import DomainRegistryError
from sitesmith.backend.app.infrastructure.domains.http_registry import HttpDomainRegistry
from sitesmith.backend.app.infrastructure.domains.in_memory_registry import InMemoryDomainRegistry

pytestmark = pytest.mark.asyncio


def make_registry(handler) -> HttpDomainRegistry:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpDomainRegistry(base_url="https://laman.ai/", api_key="secret", client=client)


async def test_register_and_unregister_post_domain():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.path, request.headers["x-api-key"], json.loads(request.content)))
        return httpx.Response(200, json={"ok": True})

    registry = make_registry(handler)
    await registry.register("test-brave-eagle-4821.laman.ai")
    await registry.unregister("test-brave-eagle-4821.laman.ai")

    assert seen == [
        ("/add-domain", "secret", {"domain": "test-brave-eagle-4821.laman.ai"}),
        ("/remove-domain", "secret", {"domain": "test-brave-eagle-4821.laman.ai"}),
    ]


async def test_non_success_status_raises():
    registry = make_registry(lambda request: httpx.Response(409, text="taken"))
    with pytest.raises(DomainRegistryError):
        await registry.register("test-brave-eagle-4821.laman.ai")


def test_requires_api_key():
    with pytest.raises(ValueError):
        HttpDomainRegistry(base_url="https://laman.ai", api_key="")


async def test_in_memory_registry_rejects_duplicates():
    registry = InMemoryDomainRegistry()
    await registry.register("a.example")

    with pytest.raises(DomainRegistryError):
        await registry.register("a.example")

    await registry.unregister("a.example")
    assert "a.example" not in registry
