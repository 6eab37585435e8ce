from __future__ import annotations

import logging

from sitesmith.backend.app.application.versions.dto import (
    EditVersionInPlaceInputDTO,
    EditVersionInPlaceOutputDTO,
)
from sitesmith.backend.app.domain.common.errors import ValidationError
from sitesmith.backend.app.domain.projects.errors import ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import strip_code_fences

logger = logging.getLogger(__name__)


class EditVersionInPlaceUseCase:
    """
    Manual-edit save: rewrites the content of an existing version.

    Unlike AppendVersionUseCase this mutates history. The version keeps its id
    and timestamp and no entry is added. If the edited version is the deployed
    one, the live site keeps the old bytes until it is published again.
    """

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: EditVersionInPlaceInputDTO) -> EditVersionInPlaceOutputDTO:
        content = strip_code_fences(dto.content or "")
        if not content:
            raise ValidationError("Invalid HTML content")

        async with self._project_repo.lock(dto.project_id):
            project = await self._project_repo.get(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=str(dto.project_id))

            version = project.edit_version_in_place(dto.index, content)
            await self._project_repo.update(project.id, versions=project.versions)

        logger.info("Edited version %s (index %d) of project %s in place", version.id, dto.index, project.id)
        return EditVersionInPlaceOutputDTO(
            success=True,
            message="HTML version updated in place",
            version_id=version.id,
            version_index=dto.index,
        )
