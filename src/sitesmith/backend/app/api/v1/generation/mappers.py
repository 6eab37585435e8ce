from uuid import UUID

from sitesmith.backend.app.api.v1.generation.schemas import GenerateWebsiteRequest
from sitesmith.backend.app.application.generation.dto import GenerateWebsiteInputDTO


def get_generate_website_input_dto(project_id: UUID, body: GenerateWebsiteRequest) -> GenerateWebsiteInputDTO:
    return GenerateWebsiteInputDTO(
        project_id=project_id,
        instructions=body.instructions,
        context=body.context,
        asset_ids=list(body.asset_ids),
        section=body.section,
        publish=body.publish,
    )
