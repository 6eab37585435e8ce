from sitesmith.backend.app.application.projects.dto import GetProjectInputDTO, ProjectDTO
from sitesmith.backend.app.application.projects.mappers import project_domain_to_output_dto
from sitesmith.backend.app.domain.projects.errors import ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository


class GetProjectUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: GetProjectInputDTO) -> ProjectDTO:
        project = await self._project_repo.get(dto.project_id)
        if not project:
            raise ProjectNotFound(project_id=str(dto.project_id))
        return project_domain_to_output_dto(project)
