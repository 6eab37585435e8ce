from __future__ import annotations

import asyncio
import logging
import os
from copy import deepcopy
from dataclasses import replace
from pathlib import Path
from typing import Any, AsyncContextManager, Optional, Sequence
from uuid import UUID

import anyio

from sitesmith.backend.app.domain.common import utcnow
from sitesmith.backend.app.domain.projects import Project
from sitesmith.backend.app.domain.projects.errors import (
    FailedToPersistProjects,
    ImmutableProjectField,
    InvalidVersionIndex,
)
from sitesmith.backend.app.domain.projects.value_objects import SortOrder
from sitesmith.backend.app.infrastructure.common.locks import KeyedLocks
from sitesmith.backend.app.infrastructure.projects.mappers import (
    project_domain_to_record,
    project_record_to_domain,
)
from sitesmith.backend.app.infrastructure.projects.models import ProjectCollection

logger = logging.getLogger(__name__)

_FROZEN_FIELDS = frozenset({"id", "created_at"})
_MUTABLE_FIELDS = frozenset({"domain", "versions", "deployed_index", "assets", "conversation"})


class JsonFileProjectRepository:
    """
    Whole-collection JSON file store.

    Every create/update/delete rewrites the full file (temp file, fsync,
    atomic rename) before returning, so a returned call is durable. The cost
    is O(total data) per mutation. If the write fails the in-memory state is
    left exactly as it was and FailedToPersistProjects is raised.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._projects: dict[UUID, Project] = self._load()
        self._locks = KeyedLocks()
        self._write_lock = asyncio.Lock()

    # ---------- Locking ----------

    def lock(self, project_id: UUID) -> AsyncContextManager[None]:
        return self._locks.hold(project_id)

    # ---------- Commands ----------

    async def create(self, domain: str) -> Project:
        project = Project(domain=domain)
        async with self._write_lock:
            staged = dict(self._projects)
            staged[project.id] = deepcopy(project)
            await self._persist(staged)
        return deepcopy(project)

    async def update(self, project_id: UUID, **changes: Any) -> Optional[Project]:
        frozen = _FROZEN_FIELDS & changes.keys()
        if frozen:
            raise ImmutableProjectField(sorted(frozen)[0])
        unknown = changes.keys() - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown project fields: {sorted(unknown)}")

        async with self._write_lock:
            current = self._projects.get(project_id)
            if current is None:
                return None
            if "domain" in changes and current.domain is not None and changes["domain"] != current.domain:
                raise ImmutableProjectField("domain")

            updated = replace(deepcopy(current), **deepcopy(changes))
            if updated.deployed_index is not None and not 0 <= updated.deployed_index < len(updated.versions):
                raise InvalidVersionIndex(updated.deployed_index, len(updated.versions))

            staged = dict(self._projects)
            staged[project_id] = updated
            await self._persist(staged)
        return deepcopy(updated)

    async def delete(self, project_id: UUID) -> bool:
        async with self._write_lock:
            if project_id not in self._projects:
                return False
            staged = dict(self._projects)
            del staged[project_id]
            await self._persist(staged)
        return True

    # ---------- Queries ----------

    async def get(self, project_id: UUID) -> Optional[Project]:
        project = self._projects.get(project_id)
        return deepcopy(project) if project else None

    async def list(
        self,
        *,
        page: int = 1,
        page_size: int = 10,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> tuple[Sequence[Project], int]:
        snapshot = sorted(
            self._projects.values(),
            key=lambda p: p.created_at,
            reverse=sort_order == SortOrder.DESC,
        )
        offset = (page - 1) * page_size
        items = [deepcopy(p) for p in snapshot[offset: offset + page_size]]
        return items, len(snapshot)

    def __len__(self) -> int:
        return len(self._projects)

    # ---------- Persistence ----------

    async def _persist(self, staged: dict[UUID, Project]) -> None:
        try:
            payload = ProjectCollection.dump_json(
                {str(pid): project_domain_to_record(p) for pid, p in staged.items()},
                indent=2,
            )
            await anyio.to_thread.run_sync(self._write, payload)
        except Exception as e:
            logger.exception("Failed to persist project store to %s", self._path)
            raise FailedToPersistProjects(str(self._path)) from e
        self._projects = staged

    def _write(self, payload: bytes) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        with open(tmp_path, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, self._path)

    def _load(self) -> dict[UUID, Project]:
        if not self._path.exists():
            return {}
        try:
            records = ProjectCollection.validate_json(self._path.read_bytes())
        except Exception:
            # keep the unreadable file for inspection and start empty
            aside = self._path.with_name(f"{self._path.name}.corrupt-{utcnow():%Y%m%dT%H%M%S}")
            logger.exception("Project store %s is unreadable; moved to %s", self._path, aside)
            os.replace(self._path, aside)
            return {}
        projects = {}
        for record in records.values():
            project = project_record_to_domain(record)
            projects[project.id] = project
        logger.info("Loaded %d project(s) from %s", len(projects), self._path)
        return projects
