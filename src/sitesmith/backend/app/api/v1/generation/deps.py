from typing import Annotated

from fastapi import Depends

from sitesmith.backend.app.api.v1.deployment.deps import get_publish_version_use_case
from sitesmith.backend.app.api.v1.versions.deps import get_append_version_use_case
from sitesmith.backend.app.application.deployment.use_cases import PublishVersionUseCase
from sitesmith.backend.app.application.generation.interfaces import TextGenerator
from sitesmith.backend.app.application.generation.use_cases import GenerateWebsiteUseCase
from sitesmith.backend.app.application.versions.use_cases import AppendVersionUseCase
from sitesmith.backend.app.core import settings
from sitesmith.backend.app.core.deps import get_project_repository, get_text_generator
from sitesmith.backend.app.domain.projects import ProjectRepository


async def get_generate_website_use_case(
        repo: Annotated[ProjectRepository, Depends(get_project_repository)],
        generator: Annotated[TextGenerator, Depends(get_text_generator)],
        append_uc: Annotated[AppendVersionUseCase, Depends(get_append_version_use_case)],
        publish_uc: Annotated[PublishVersionUseCase, Depends(get_publish_version_use_case)],
) -> GenerateWebsiteUseCase:
    return GenerateWebsiteUseCase(
        repo,
        generator,
        append_uc,
        publish_uc,
        timeout_s=settings.GENERATION_TIMEOUT_S,
    )
