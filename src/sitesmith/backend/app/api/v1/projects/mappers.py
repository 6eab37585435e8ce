from uuid import UUID

from sitesmith.backend.app.api.v1.projects.schemas import ListProjectsResponse, ProjectResponse
from sitesmith.backend.app.application.projects.dto import DeleteProjectInputDTO, GetProjectInputDTO, \
    ListProjectsInputDTO, ProjectPageDTO, ReplaceConversationInputDTO
from sitesmith.backend.app.domain.projects.value_objects import SortOrder


def get_get_project_input_dto(project_id: UUID) -> GetProjectInputDTO:
    return GetProjectInputDTO(project_id=project_id)


def get_delete_project_input_dto(project_id: UUID) -> DeleteProjectInputDTO:
    return DeleteProjectInputDTO(project_id=project_id)


def get_list_projects_input_dto(page: int, limit: int, sort: SortOrder) -> ListProjectsInputDTO:
    return ListProjectsInputDTO(page=page, page_size=limit, sort_order=sort)


def get_replace_conversation_input_dto(project_id: UUID, messages: list[dict]) -> ReplaceConversationInputDTO:
    return ReplaceConversationInputDTO(project_id=project_id, messages=messages)


def project_page_dto_to_schema(page_dto: ProjectPageDTO) -> ListProjectsResponse:
    items = [ProjectResponse.model_validate(p) for p in page_dto.items]
    return ListProjectsResponse(
        items=items,
        page=page_dto.page,
        limit=page_dto.page_size,
        total_count=page_dto.total_count,
        total_pages=page_dto.total_pages,
    )
