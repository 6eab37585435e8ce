from __future__ import annotations

import logging
from typing import Optional

import httpx

from sitesmith.backend.app.domain.domains.errors import DomainRegistryError

logger = logging.getLogger(__name__)


class HttpDomainRegistry:
    """
    Hosting-provider domain API: POST /add-domain and POST /remove-domain with
    a JSON body {"domain": ...}, authenticated by an X-API-Key header.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_s: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not api_key:
            raise ValueError("DOMAIN_REGISTRY_API_KEY not set")
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout_s)
        self._headers = {"Content-Type": "application/json", "X-API-Key": api_key}

    async def register(self, hostname: str) -> None:
        await self._post("/add-domain", hostname, operation="register")
        logger.info("Registered domain %s", hostname)

    async def unregister(self, hostname: str) -> None:
        await self._post("/remove-domain", hostname, operation="unregister")
        logger.info("Unregistered domain %s", hostname)

    async def _post(self, path: str, hostname: str, *, operation: str) -> None:
        try:
            response = await self._client.post(
                f"{self._base_url}{path}",
                headers=self._headers,
                json={"domain": hostname},
            )
        except httpx.HTTPError as e:
            raise DomainRegistryError(operation, hostname, str(e)) from e
        if not response.is_success:
            logger.error("Domain %s for %s failed: %s - %s", operation, hostname, response.status_code, response.text)
            raise DomainRegistryError(operation, hostname, f"HTTP {response.status_code}")

    async def aclose(self) -> None:
        await self._client.aclose()
