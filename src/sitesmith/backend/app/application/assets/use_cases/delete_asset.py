from __future__ import annotations

import logging

from sitesmith.backend.app.application.assets.dto import DeleteAssetInputDTO, DeleteAssetOutputDTO
from sitesmith.backend.app.application.common.upstream import bounded
from sitesmith.backend.app.domain.files.interfaces import ObjectStore
from sitesmith.backend.app.domain.projects.errors import (
    FailedToDeleteAsset,
    ProjectHasNoDomain,
    ProjectNotFound,
)
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import SiteLayout

logger = logging.getLogger(__name__)


class DeleteAssetUseCase:
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

    async def execute(self, dto: DeleteAssetInputDTO) -> DeleteAssetOutputDTO:
        async with self._project_repo.lock(dto.project_id):
            project = await self._project_repo.get(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=str(dto.project_id))

            asset = project.find_asset(dto.asset_id)
            if not project.domain:
                raise ProjectHasNoDomain(str(project.id))

            # storage first: a failed delete keeps the record so nothing leaks silently
            key = self._layout.asset_key(project.domain, asset.filename)
            try:
                await bounded(lambda: self._object_store.delete(key), timeout_s=self._timeout_s)
            except Exception as e:
                logger.error("Failed to delete asset %s from storage: %s", key, e)
                raise FailedToDeleteAsset(asset.filename) from e

            project.remove_asset(asset.id)
            await self._project_repo.update(project.id, assets=project.assets)

        logger.info("Deleted asset %s from project %s", asset.filename, project.id)
        return DeleteAssetOutputDTO(success=True, message="File deleted", asset_id=asset.id)
