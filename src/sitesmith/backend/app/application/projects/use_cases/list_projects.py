# sitesmith/backend/app/application/projects/use_cases/list_projects.py
from __future__ import annotations

from sitesmith.backend.app.application.projects.dto import ListProjectsInputDTO, ProjectPageDTO
from sitesmith.backend.app.application.projects.mappers import build_project_page
from sitesmith.backend.app.domain.common.errors import ValidationError
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository


class ListProjectsUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: ListProjectsInputDTO) -> ProjectPageDTO:
        if dto.page < 1 or dto.page_size < 1:
            raise ValidationError("page and page_size must be positive")

        projects, total = await self._project_repo.list(
            page=dto.page,
            page_size=dto.page_size,
            sort_order=dto.sort_order,
        )
        return build_project_page(
            projects,
            total_count=total,
            page=dto.page,
            page_size=dto.page_size,
        )
