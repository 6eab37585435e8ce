from typing import Protocol, runtime_checkable


@runtime_checkable
class ObjectStore(Protocol):
    async def put(self, key: str, content: bytes, content_type: str) -> None:
        ...

    async def get(self, key: str) -> bytes:
        """
        Raises ObjectNotFound when nothing is stored under key.
        """
        ...

    async def delete(self, key: str) -> None:
        ...

    async def list(self, prefix: str) -> list[str]:
        ...
