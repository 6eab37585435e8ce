from typing import Annotated

from fastapi import Depends

from sitesmith.backend.app.application.deployment.use_cases import PublishVersionUseCase
from sitesmith.backend.app.core import settings
from sitesmith.backend.app.core.deps import get_object_store, get_project_repository, get_site_layout
from sitesmith.backend.app.domain.files import ObjectStore
from sitesmith.backend.app.domain.projects import ProjectRepository, SiteLayout


async def get_publish_version_use_case(
        repo: Annotated[ProjectRepository, Depends(get_project_repository)],
        storage: Annotated[ObjectStore, Depends(get_object_store)],
        layout: Annotated[SiteLayout, Depends(get_site_layout)],
) -> PublishVersionUseCase:
    return PublishVersionUseCase(repo, storage, layout, timeout_s=settings.UPSTREAM_TIMEOUT_S)
