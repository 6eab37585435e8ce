from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from sitesmith.backend.app.api.v1.projects.deps import get_create_project_use_case, get_delete_project_use_case, \
    get_get_project_use_case, get_list_projects_use_case, get_replace_conversation_use_case
from sitesmith.backend.app.api.v1.projects.mappers import get_delete_project_input_dto, get_get_project_input_dto, \
    get_list_projects_input_dto, get_replace_conversation_input_dto, project_page_dto_to_schema
from sitesmith.backend.app.api.v1.projects.schemas import CreateProjectResponse, DeleteProjectResponse, \
    ListProjectsResponse, ProjectResponse, ReplaceConversationRequest
from sitesmith.backend.app.application.projects.use_cases import CreateProjectUseCase, DeleteProjectUseCase, \
    GetProjectUseCase, ListProjectsUseCase, ReplaceConversationUseCase
from sitesmith.backend.app.domain.projects.value_objects import SortOrder

router = APIRouter(prefix="/projects", tags=["projects"])

create_project_dep = Annotated[CreateProjectUseCase, Depends(get_create_project_use_case)]
get_project_dep = Annotated[GetProjectUseCase, Depends(get_get_project_use_case)]
list_projects_dep = Annotated[ListProjectsUseCase, Depends(get_list_projects_use_case)]
delete_project_dep = Annotated[DeleteProjectUseCase, Depends(get_delete_project_use_case)]
replace_conversation_dep = Annotated[ReplaceConversationUseCase, Depends(get_replace_conversation_use_case)]


@router.post("", response_model=CreateProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(use_case: create_project_dep):
    created = await use_case.execute()
    return CreateProjectResponse.model_validate(created)


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
        use_case: list_projects_dep,
        page: Annotated[int, Query(ge=1)] = 1,
        limit: Annotated[int, Query(ge=1, le=100)] = 10,
        sort: SortOrder = SortOrder.DESC,
):
    page_dto = await use_case.execute(get_list_projects_input_dto(page, limit, sort))
    return project_page_dto_to_schema(page_dto)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(use_case: get_project_dep, project_id: UUID):
    project_dto = await use_case.execute(get_get_project_input_dto(project_id))
    return ProjectResponse.model_validate(project_dto)


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(use_case: delete_project_dep, project_id: UUID):
    result = await use_case.execute(get_delete_project_input_dto(project_id))
    return DeleteProjectResponse.model_validate(result)


@router.put("/{project_id}/conversation", status_code=status.HTTP_204_NO_CONTENT)
async def replace_conversation(
        use_case: replace_conversation_dep,
        project_id: UUID,
        body: ReplaceConversationRequest,
) -> None:
    await use_case.execute(get_replace_conversation_input_dto(project_id, body.messages))
    return None
