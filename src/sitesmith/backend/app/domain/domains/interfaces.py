from typing import Protocol


class DomainRegistry(Protocol):
    async def register(self, hostname: str) -> None:
        ...

    async def unregister(self, hostname: str) -> None:
        ...
