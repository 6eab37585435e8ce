from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from sitesmith.backend.app.api.v1.deployment.deps import get_publish_version_use_case
from sitesmith.backend.app.api.v1.deployment.mappers import get_publish_version_input_dto
from sitesmith.backend.app.api.v1.deployment.schemas import PublishRequest, PublishResponse
from sitesmith.backend.app.application.deployment.use_cases import PublishVersionUseCase

router = APIRouter(prefix="/projects/{project_id}", tags=["deployment"])

publish_version_dep = Annotated[PublishVersionUseCase, Depends(get_publish_version_use_case)]


@router.put("/deploy", response_model=PublishResponse)
async def publish_version(use_case: publish_version_dep, project_id: UUID, body: PublishRequest):
    result = await use_case.execute(get_publish_version_input_dto(project_id, body.version_index))
    return PublishResponse.model_validate(result)
