from uuid import UUID

from sitesmith.backend.app.application.versions.dto import AppendVersionInputDTO, EditVersionInPlaceInputDTO, \
    GetCurrentVersionInputDTO, GetVersionInputDTO, NavigateVersionsInputDTO
from sitesmith.backend.app.domain.projects.value_objects import NavigationDirection


def get_append_version_input_dto(project_id: UUID, content: str) -> AppendVersionInputDTO:
    return AppendVersionInputDTO(project_id=project_id, content=content)


def get_edit_version_input_dto(project_id: UUID, index: int, content: str) -> EditVersionInPlaceInputDTO:
    return EditVersionInPlaceInputDTO(project_id=project_id, index=index, content=content)


def get_get_version_input_dto(project_id: UUID, version_id: UUID) -> GetVersionInputDTO:
    return GetVersionInputDTO(project_id=project_id, version_id=version_id)


def get_current_version_input_dto(project_id: UUID) -> GetCurrentVersionInputDTO:
    return GetCurrentVersionInputDTO(project_id=project_id)


def get_navigate_versions_input_dto(
        project_id: UUID,
        from_index: int,
        direction: NavigationDirection,
) -> NavigateVersionsInputDTO:
    return NavigateVersionsInputDTO(project_id=project_id, from_index=from_index, direction=direction)
