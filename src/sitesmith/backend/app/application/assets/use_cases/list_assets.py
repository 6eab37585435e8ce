from typing import List

from sitesmith.backend.app.application.assets.dto import AssetDTO, ListAssetsInputDTO
from sitesmith.backend.app.application.projects.mappers import asset_domain_to_dto
from sitesmith.backend.app.domain.projects.errors import ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository


class ListAssetsUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: ListAssetsInputDTO) -> List[AssetDTO]:
        project = await self._project_repo.get(dto.project_id)
        if not project:
            raise ProjectNotFound(project_id=str(dto.project_id))
        return [asset_domain_to_dto(a) for a in project.assets]
