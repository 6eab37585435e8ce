from sitesmith.backend.app.application.projects.mappers import version_domain_to_dto
from sitesmith.backend.app.application.versions.dto import (
    GetCurrentVersionInputDTO,
    GetVersionInputDTO,
    HtmlVersionDTO,
)
from sitesmith.backend.app.domain.projects.errors import ProjectNotFound, VersionNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository


class GetVersionUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: GetVersionInputDTO) -> HtmlVersionDTO:
        project = await self._project_repo.get(dto.project_id)
        if not project:
            raise ProjectNotFound(project_id=str(dto.project_id))
        version = project.find_version(dto.version_id)
        return version_domain_to_dto(project, project.versions.index(version))


class GetCurrentVersionUseCase:
    """Deployed version, or the newest one when nothing is deployed yet."""

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: GetCurrentVersionInputDTO) -> HtmlVersionDTO:
        project = await self._project_repo.get(dto.project_id)
        if not project:
            raise ProjectNotFound(project_id=str(dto.project_id))
        index = project.current_index()
        if index is None:
            raise VersionNotFound("current")
        return version_domain_to_dto(project, index)
