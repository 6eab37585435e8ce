from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from sitesmith.backend.app.api.v1.generation.deps import get_generate_website_use_case
from sitesmith.backend.app.api.v1.generation.mappers import get_generate_website_input_dto
from sitesmith.backend.app.api.v1.generation.schemas import GenerateWebsiteRequest, GenerateWebsiteResponse
from sitesmith.backend.app.application.generation.use_cases import GenerateWebsiteUseCase

router = APIRouter(prefix="/projects/{project_id}", tags=["generation"])

generate_website_dep = Annotated[GenerateWebsiteUseCase, Depends(get_generate_website_use_case)]


@router.post("/generate", response_model=GenerateWebsiteResponse)
async def generate_website(use_case: generate_website_dep, project_id: UUID, body: GenerateWebsiteRequest):
    result = await use_case.execute(get_generate_website_input_dto(project_id, body))
    return GenerateWebsiteResponse.model_validate(result)
