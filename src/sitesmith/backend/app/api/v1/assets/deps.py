from typing import Annotated

from fastapi import Depends

from sitesmith.backend.app.application.assets.interfaces import Captioner, ImageProcessor
from sitesmith.backend.app.application.assets.use_cases import DeleteAssetUseCase, ListAssetsUseCase, \
    UploadAssetUseCase
from sitesmith.backend.app.core import settings
from sitesmith.backend.app.core.deps import get_captioner, get_image_processor, get_object_store, \
    get_project_repository, get_site_layout
from sitesmith.backend.app.domain.files import ObjectStore
from sitesmith.backend.app.domain.projects import ProjectRepository, SiteLayout

project_repo_dep = Annotated[ProjectRepository, Depends(get_project_repository)]
object_store_dep = Annotated[ObjectStore, Depends(get_object_store)]
layout_dep = Annotated[SiteLayout, Depends(get_site_layout)]


async def get_upload_asset_use_case(
        repo: project_repo_dep,
        storage: object_store_dep,
        processor: Annotated[ImageProcessor, Depends(get_image_processor)],
        captioner: Annotated[Captioner, Depends(get_captioner)],
        layout: layout_dep,
) -> UploadAssetUseCase:
    return UploadAssetUseCase(repo, storage, processor, captioner, layout, timeout_s=settings.UPSTREAM_TIMEOUT_S)


async def get_delete_asset_use_case(
        repo: project_repo_dep,
        storage: object_store_dep,
        layout: layout_dep,
) -> DeleteAssetUseCase:
    return DeleteAssetUseCase(repo, storage, layout, timeout_s=settings.UPSTREAM_TIMEOUT_S)


async def get_list_assets_use_case(repo: project_repo_dep) -> ListAssetsUseCase:
    return ListAssetsUseCase(repo)
