"""Object store client for a Supabase-style storage REST API."""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from sitesmith.backend.app.domain.files.errors import ObjectNotFound, ObjectStoreError

logger = logging.getLogger(__name__)

LIST_PAGE_SIZE = 1000


def _encode_key(key: str) -> str:
    # quote each segment, keep the slashes that define the folder structure
    return "/".join(quote(segment, safe="") for segment in key.split("/"))


class HttpObjectStore:
    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        bucket: str,
        timeout_s: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not base_url or not api_key:
            raise ValueError(
                "Object store URL and API key must be configured. "
                "Set OBJECT_STORE_URL and OBJECT_STORE_API_KEY."
            )
        self._bucket = bucket
        self._client = client or httpx.AsyncClient(timeout=timeout_s)
        self._storage_url = f"{base_url.rstrip('/')}/storage/v1"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
        }

    def _object_url(self, key: str) -> str:
        return f"{self._storage_url}/object/{self._bucket}/{_encode_key(key)}"

    async def put(self, key: str, content: bytes, content_type: str) -> None:
        headers = {**self._headers, "Content-Type": content_type, "x-upsert": "true"}
        try:
            response = await self._client.post(self._object_url(key), headers=headers, content=content)
        except httpx.HTTPError as e:
            raise ObjectStoreError("put", key, str(e)) from e
        if response.status_code not in (200, 201):
            logger.error("Storage upload failed for %s: %s - %s", key, response.status_code, response.text)
            raise ObjectStoreError("put", key, f"HTTP {response.status_code}")

    async def get(self, key: str) -> bytes:
        try:
            response = await self._client.get(self._object_url(key), headers=self._headers)
        except httpx.HTTPError as e:
            raise ObjectStoreError("get", key, str(e)) from e
        if response.status_code == 404:
            raise ObjectNotFound(key)
        if response.status_code != 200:
            raise ObjectStoreError("get", key, f"HTTP {response.status_code}")
        return response.content

    async def delete(self, key: str) -> None:
        try:
            response = await self._client.delete(self._object_url(key), headers=self._headers)
        except httpx.HTTPError as e:
            raise ObjectStoreError("delete", key, str(e)) from e
        # already gone counts as deleted
        if response.status_code not in (200, 204, 404):
            logger.error("Storage delete failed for %s: %s - %s", key, response.status_code, response.text)
            raise ObjectStoreError("delete", key, f"HTTP {response.status_code}")

    async def list(self, prefix: str) -> list[str]:
        folder = prefix.rstrip("/")
        keys: list[str] = []
        pending = [folder]
        while pending:
            current = pending.pop()
            for entry in await self._list_folder(current):
                name = entry.get("name")
                if not name:
                    continue
                path = f"{current}/{name}" if current else name
                # folders come back without an id
                if entry.get("id") is None:
                    pending.append(path)
                elif path.startswith(prefix):
                    keys.append(path)
        return sorted(keys)

    async def _list_folder(self, folder: str) -> list[dict]:
        entries: list[dict] = []
        offset = 0
        while True:
            try:
                response = await self._client.post(
                    f"{self._storage_url}/object/list/{self._bucket}",
                    headers=self._headers,
                    json={"prefix": folder, "limit": LIST_PAGE_SIZE, "offset": offset},
                )
            except httpx.HTTPError as e:
                raise ObjectStoreError("list", folder, str(e)) from e
            if response.status_code != 200:
                raise ObjectStoreError("list", folder, f"HTTP {response.status_code}")
            page = response.json()
            entries.extend(page)
            if len(page) < LIST_PAGE_SIZE:
                return entries
            offset += LIST_PAGE_SIZE

    async def aclose(self) -> None:
        await self._client.aclose()
