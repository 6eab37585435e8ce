from __future__ import annotations

import os
from pathlib import Path

import anyio

from sitesmith.backend.app.domain.files.errors import ObjectNotFound, ObjectStoreError


class FilesystemObjectStore:
    """
    Object store backed by a local directory. Keys map to relative paths;
    the content type is not kept.
    """

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = Path(base_dir).resolve()

    def _path_for(self, key: str) -> Path:
        full_path = (self._base_dir / key.lstrip("/")).resolve()
        if full_path == self._base_dir or self._base_dir not in full_path.parents:
            raise ObjectStoreError("resolve", key, "key escapes the storage directory")
        return full_path

    async def put(self, key: str, content: bytes, content_type: str) -> None:
        full_path = self._path_for(key)

        def _write() -> None:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = full_path.with_name(full_path.name + ".part")
            with open(tmp_path, "wb") as f:
                f.write(content)
            os.replace(tmp_path, full_path)

        try:
            await anyio.to_thread.run_sync(_write)
        except OSError as e:
            raise ObjectStoreError("put", key, str(e)) from e

    async def get(self, key: str) -> bytes:
        full_path = self._path_for(key)
        if not full_path.is_file():
            raise ObjectNotFound(key)
        try:
            return await anyio.to_thread.run_sync(full_path.read_bytes)
        except OSError as e:
            raise ObjectStoreError("get", key, str(e)) from e

    async def delete(self, key: str) -> None:
        full_path = self._path_for(key)
        try:
            if full_path.exists():
                full_path.unlink()
        except OSError as e:
            raise ObjectStoreError("delete", key, str(e)) from e

    async def list(self, prefix: str) -> list[str]:
        if not self._base_dir.exists():
            return []

        def _walk() -> list[str]:
            keys = []
            for path in self._base_dir.rglob("*"):
                if path.is_file() and not path.name.endswith(".part"):
                    key = path.relative_to(self._base_dir).as_posix()
                    if key.startswith(prefix):
                        keys.append(key)
            return sorted(keys)

        return await anyio.to_thread.run_sync(_walk)
