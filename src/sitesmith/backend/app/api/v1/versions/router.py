from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from sitesmith.backend.app.api.v1.versions.deps import get_append_version_use_case, get_current_version_use_case, \
    get_edit_version_use_case, get_get_version_use_case, get_navigate_versions_use_case
from sitesmith.backend.app.api.v1.versions.mappers import get_append_version_input_dto, \
    get_current_version_input_dto, get_edit_version_input_dto, get_get_version_input_dto, \
    get_navigate_versions_input_dto
from sitesmith.backend.app.api.v1.versions.schemas import HtmlContentRequest, HtmlVersionResponse, \
    VersionWriteResponse
from sitesmith.backend.app.application.versions.use_cases import AppendVersionUseCase, EditVersionInPlaceUseCase, \
    GetCurrentVersionUseCase, GetVersionUseCase, NavigateVersionsUseCase
from sitesmith.backend.app.domain.projects.value_objects import NavigationDirection

router = APIRouter(prefix="/projects/{project_id}/versions", tags=["versions"])

append_version_dep = Annotated[AppendVersionUseCase, Depends(get_append_version_use_case)]
edit_version_dep = Annotated[EditVersionInPlaceUseCase, Depends(get_edit_version_use_case)]
get_version_dep = Annotated[GetVersionUseCase, Depends(get_get_version_use_case)]
current_version_dep = Annotated[GetCurrentVersionUseCase, Depends(get_current_version_use_case)]
navigate_versions_dep = Annotated[NavigateVersionsUseCase, Depends(get_navigate_versions_use_case)]


@router.post("", response_model=VersionWriteResponse, status_code=status.HTTP_201_CREATED)
async def append_version(use_case: append_version_dep, project_id: UUID, body: HtmlContentRequest):
    result = await use_case.execute(get_append_version_input_dto(project_id, body.content))
    return VersionWriteResponse.model_validate(result)


# static paths are declared before /{version_id} so they are not parsed as ids
@router.get("/current", response_model=HtmlVersionResponse)
async def get_current_version(use_case: current_version_dep, project_id: UUID):
    version = await use_case.execute(get_current_version_input_dto(project_id))
    return HtmlVersionResponse.model_validate(version)


@router.get("/navigate", response_model=HtmlVersionResponse)
async def navigate_versions(
        use_case: navigate_versions_dep,
        project_id: UUID,
        from_index: Annotated[int, Query(ge=0)],
        direction: NavigationDirection,
):
    version = await use_case.execute(get_navigate_versions_input_dto(project_id, from_index, direction))
    return HtmlVersionResponse.model_validate(version)


@router.get("/{version_id}", response_model=HtmlVersionResponse)
async def get_version(use_case: get_version_dep, project_id: UUID, version_id: UUID):
    version = await use_case.execute(get_get_version_input_dto(project_id, version_id))
    return HtmlVersionResponse.model_validate(version)


@router.put("/{index}", response_model=VersionWriteResponse)
async def edit_version_in_place(
        use_case: edit_version_dep,
        project_id: UUID,
        index: int,
        body: HtmlContentRequest,
):
    result = await use_case.execute(get_edit_version_input_dto(project_id, index, body.content))
    return VersionWriteResponse.model_validate(result)
