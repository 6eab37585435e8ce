from __future__ import annotations

import logging

from sitesmith.backend.app.application.common.upstream import bounded
from sitesmith.backend.app.application.deployment.dto import PublishResultDTO, PublishVersionInputDTO
from sitesmith.backend.app.domain.files.interfaces import ObjectStore
from sitesmith.backend.app.domain.projects.errors import (
    FailedToDeployVersion,
    ProjectHasNoDomain,
    ProjectNotFound,
)
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import SiteLayout

logger = logging.getLogger(__name__)


class PublishVersionUseCase:
    """
    The only writer of Project.deployed_index.

    The object write happens first and the pointer is committed only after it
    succeeded, so the pointer never names content that is not live. Between the
    two steps a reader may still see the previous index while the new bytes are
    already served; the object store is the source of truth for what is live.

    Publishes for one project are serialized by the project lock, so the last
    publish to finish wins for both the object and the pointer.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        object_store: ObjectStore,
        layout: SiteLayout,
        *,
        timeout_s: float,
    ) -> None:
        self._project_repo = project_repo
        self._object_store = object_store
        self._layout = layout
        self._timeout_s = timeout_s

    async def execute(self, dto: PublishVersionInputDTO) -> PublishResultDTO:
        async with self._project_repo.lock(dto.project_id):
            project = await self._project_repo.get(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=str(dto.project_id))

            version = project.version_at(dto.version_index)
            if not project.domain:
                raise ProjectHasNoDomain(str(project.id))

            key = self._layout.index_key(project.domain)
            try:
                await bounded(
                    lambda: self._object_store.put(key, version.content.encode("utf-8"), "text/html"),
                    timeout_s=self._timeout_s,
                )
            except Exception as e:
                logger.error("Error deploying version %d of project %s: %s", dto.version_index, project.id, e)
                raise FailedToDeployVersion(project.domain, dto.version_index) from e

            project.mark_deployed(dto.version_index)
            await self._project_repo.update(project.id, deployed_index=project.deployed_index)

        logger.info("Deployed version %d of project %s to %s", dto.version_index, project.id, project.domain)
        return PublishResultDTO(
            success=True,
            message="Version deployed successfully",
            url=SiteLayout.site_url(project.domain),
            domain=project.domain,
            version_index=dto.version_index,
        )
