from uuid import UUID

from sitesmith.backend.app.application.deployment.dto import PublishVersionInputDTO


def get_publish_version_input_dto(project_id: UUID, version_index: int) -> PublishVersionInputDTO:
    return PublishVersionInputDTO(project_id=project_id, version_index=version_index)
