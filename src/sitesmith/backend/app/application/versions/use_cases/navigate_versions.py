from sitesmith.backend.app.application.projects.mappers import version_domain_to_dto
from sitesmith.backend.app.application.versions.dto import HtmlVersionDTO, NavigateVersionsInputDTO
from sitesmith.backend.app.domain.projects.errors import InvalidVersionIndex, ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import VersionCursor


class NavigateVersionsUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: NavigateVersionsInputDTO) -> HtmlVersionDTO:
        project = await self._project_repo.get(dto.project_id)
        if not project:
            raise ProjectNotFound(project_id=str(dto.project_id))

        count = len(project.versions)
        if not 0 <= dto.from_index < count:
            raise InvalidVersionIndex(dto.from_index, count)

        cursor = VersionCursor(index=dto.from_index, count=count).move(dto.direction)
        return version_domain_to_dto(project, cursor.index)
