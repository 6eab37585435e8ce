from sitesmith.backend.app.application.projects.dto import ReplaceConversationInputDTO
from sitesmith.backend.app.domain.projects.errors import ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository


class ReplaceConversationUseCase:
    """Stores the chat transcript as-is; its contents are never inspected."""

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: ReplaceConversationInputDTO) -> None:
        async with self._project_repo.lock(dto.project_id):
            updated = await self._project_repo.update(dto.project_id, conversation=list(dto.messages))
            if not updated:
                raise ProjectNotFound(project_id=str(dto.project_id))
