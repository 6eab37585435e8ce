from __future__ import annotations

from typing import Any, AsyncContextManager, Optional, Protocol, Sequence
from uuid import UUID

from .entities import Project
from .value_objects import SortOrder


class ProjectRepository(Protocol):
    """
    Keyed store of Project records.

    Every mutating call is durable once it returns. Records handed out are
    copies; callers persist changes through update().
    """

    def lock(self, project_id: UUID) -> AsyncContextManager[None]:
        ...

    async def create(self, domain: str) -> Project:
        ...

    async def get(self, project_id: UUID) -> Optional[Project]:
        ...

    async def update(self, project_id: UUID, **changes: Any) -> Optional[Project]:
        ...

    async def delete(self, project_id: UUID) -> bool:
        ...

    async def list(
        self,
        *,
        page: int = 1,
        page_size: int = 10,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> tuple[Sequence[Project], int]:
        ...
