from __future__ import annotations

from collections.abc import Sequence
from copy import deepcopy
from dataclasses import replace
from typing import Any, AsyncContextManager, Optional
from uuid import UUID

from sitesmith.backend.app.domain.projects.entities import Project
from sitesmith.backend.app.domain.projects.errors import FailedToPersistProjects
from sitesmith.backend.app.domain.projects.value_objects import SortOrder
from sitesmith.backend.app.infrastructure.common.locks import KeyedLocks


class FakeProjectRepository:
    """
    In-memory fake implementation of ProjectRepository for unit tests.
    Set `fail_writes` to make every mutation raise FailedToPersistProjects
    without touching state.
    """

    def __init__(self) -> None:
        self._projects: dict[UUID, Project] = {}
        self._locks = KeyedLocks()
        self.fail_writes = False
        self.update_calls: list[dict[str, Any]] = []

    def lock(self, project_id: UUID) -> AsyncContextManager[None]:
        return self._locks.hold(project_id)

    async def create(self, domain: str) -> Project:
        self._check_write()
        project = Project(domain=domain)
        self._projects[project.id] = deepcopy(project)
        return deepcopy(project)

    async def get(self, project_id: UUID) -> Optional[Project]:
        project = self._projects.get(project_id)
        return deepcopy(project) if project else None

    async def update(self, project_id: UUID, **changes: Any) -> Optional[Project]:
        self.update_calls.append(changes)
        current = self._projects.get(project_id)
        if current is None:
            return None
        self._check_write()
        updated = replace(deepcopy(current), **deepcopy(changes))
        self._projects[project_id] = updated
        return deepcopy(updated)

    async def delete(self, project_id: UUID) -> bool:
        if project_id not in self._projects:
            return False
        self._check_write()
        del self._projects[project_id]
        return True

    async def list(
        self,
        *,
        page: int = 1,
        page_size: int = 10,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> tuple[Sequence[Project], int]:
        items = sorted(self._projects.values(), key=lambda p: p.created_at, reverse=sort_order == SortOrder.DESC)
        offset = (page - 1) * page_size
        return [deepcopy(p) for p in items[offset: offset + page_size]], len(items)

    # ---------- test helpers (intentional) ----------

    def seed(self, project: Project) -> Project:
        self._projects[project.id] = deepcopy(project)
        return project

    def count(self) -> int:
        return len(self._projects)

    def _check_write(self) -> None:
        if self.fail_writes:
            raise FailedToPersistProjects("/fake/.store.json")
