from __future__ import annotations

import logging

from sitesmith.backend.app.application.common.upstream import bounded
from sitesmith.backend.app.application.projects.dto import DeleteProjectInputDTO, DeleteProjectResultDTO
from sitesmith.backend.app.domain.domains.interfaces import DomainRegistry
from sitesmith.backend.app.domain.files.interfaces import ObjectStore
from sitesmith.backend.app.domain.projects.entities import Project
from sitesmith.backend.app.domain.projects.errors import ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import SiteLayout

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """
    Tear a project down across the object store, the domain registry and the
    project store.

    External cleanup is best effort: each failure is logged and reported in the
    result message, and the record is removed regardless.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        object_store: ObjectStore,
        domain_registry: DomainRegistry,
        layout: SiteLayout,
        *,
        timeout_s: float,
    ) -> None:
        self._project_repo = project_repo
        self._object_store = object_store
        self._domain_registry = domain_registry
        self._layout = layout
        self._timeout_s = timeout_s

    async def execute(self, dto: DeleteProjectInputDTO) -> DeleteProjectResultDTO:
        async with self._project_repo.lock(dto.project_id):
            project = await self._project_repo.get(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=str(dto.project_id))

            failed_steps: list[str] = []
            if project.domain:
                failed_steps.extend(await self._delete_objects(project))
                if not await self._release_domain(project.domain):
                    failed_steps.append(f"domain {project.domain}")

            # the record goes regardless of upstream outcome
            if not await self._project_repo.delete(project.id):
                raise ProjectNotFound(project_id=str(project.id))

        if failed_steps:
            message = "Project deleted, but cleanup failed for: " + ", ".join(failed_steps)
            logger.warning("Project %s deleted with cleanup failures: %s", project.id, failed_steps)
        else:
            message = "Project deleted successfully"
            logger.info("Project %s deleted", project.id)
        return DeleteProjectResultDTO(success=True, message=message, failed_steps=failed_steps)

    async def _delete_objects(self, project: Project) -> list[str]:
        domain = project.domain
        failed: list[str] = []
        attempted: set[str] = set()

        index_key = self._layout.index_key(domain)
        attempted.add(index_key)
        if not await self._delete_key(index_key):
            failed.append("site HTML")

        asset_failures = 0
        for asset in project.assets:
            key = self._layout.asset_key(domain, asset.filename)
            attempted.add(key)
            if not await self._delete_key(key):
                asset_failures += 1
        if asset_failures:
            failed.append(f"asset objects ({asset_failures} of {len(project.assets)})")

        # sweep anything else left under the site prefix
        try:
            leftovers = await bounded(
                lambda: self._object_store.list(self._layout.site_prefix(domain)),
                timeout_s=self._timeout_s,
            )
        except Exception as e:
            logger.error("Could not list objects for %s: %s", domain, e)
            failed.append("object listing")
            return failed

        stray_failures = 0
        for key in leftovers:
            if key in attempted:
                continue
            if not await self._delete_key(key):
                stray_failures += 1
        if stray_failures:
            failed.append(f"stray objects ({stray_failures})")
        return failed

    async def _delete_key(self, key: str) -> bool:
        try:
            await bounded(lambda: self._object_store.delete(key), timeout_s=self._timeout_s)
        except Exception as e:
            logger.error("Failed to delete object %s: %s", key, e)
            return False
        return True

    async def _release_domain(self, hostname: str) -> bool:
        try:
            await bounded(lambda: self._domain_registry.unregister(hostname), timeout_s=self._timeout_s)
        except Exception as e:
            logger.error("Failed to unregister domain %s: %s", hostname, e)
            return False
        return True
