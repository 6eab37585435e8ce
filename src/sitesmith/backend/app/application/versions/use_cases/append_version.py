from __future__ import annotations

import logging

from sitesmith.backend.app.application.versions.dto import AppendVersionInputDTO, AppendVersionOutputDTO
from sitesmith.backend.app.domain.common.errors import ValidationError
from sitesmith.backend.app.domain.projects.errors import ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import strip_code_fences

logger = logging.getLogger(__name__)


class AppendVersionUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: AppendVersionInputDTO) -> AppendVersionOutputDTO:
        content = strip_code_fences(dto.content or "")
        if not content:
            raise ValidationError("Invalid HTML content")

        async with self._project_repo.lock(dto.project_id):
            project = await self._project_repo.get(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=str(dto.project_id))

            version = project.append_version(content)
            await self._project_repo.update(project.id, versions=project.versions)

        index = len(project.versions) - 1
        logger.info("Appended version %s (index %d) to project %s", version.id, index, project.id)
        return AppendVersionOutputDTO(
            success=True,
            message="HTML version added",
            version_id=version.id,
            version_index=index,
        )
