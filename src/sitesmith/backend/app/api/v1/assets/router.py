from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status

from sitesmith.backend.app.api.v1.assets.deps import get_delete_asset_use_case, get_list_assets_use_case, \
    get_upload_asset_use_case
from sitesmith.backend.app.api.v1.assets.mappers import assets_dto_to_schema, get_delete_asset_input_dto, \
    get_list_assets_input_dto, get_upload_asset_input_dto
from sitesmith.backend.app.api.v1.assets.schemas import DeleteAssetResponse, ListAssetsResponse, \
    UploadAssetResponse
from sitesmith.backend.app.application.assets.use_cases import DeleteAssetUseCase, ListAssetsUseCase, \
    UploadAssetUseCase

router = APIRouter(prefix="/projects/{project_id}/assets", tags=["assets"])

upload_asset_dep = Annotated[UploadAssetUseCase, Depends(get_upload_asset_use_case)]
delete_asset_dep = Annotated[DeleteAssetUseCase, Depends(get_delete_asset_use_case)]
list_assets_dep = Annotated[ListAssetsUseCase, Depends(get_list_assets_use_case)]


@router.get("", response_model=ListAssetsResponse)
async def list_assets(use_case: list_assets_dep, project_id: UUID):
    assets_dto = await use_case.execute(get_list_assets_input_dto(project_id))
    return assets_dto_to_schema(assets_dto)


@router.post("", response_model=UploadAssetResponse, status_code=status.HTTP_201_CREATED)
async def upload_asset(
        use_case: upload_asset_dep,
        project_id: UUID,
        file: UploadFile = File(...),
):
    file_bytes = await file.read()
    result = await use_case.execute(get_upload_asset_input_dto(project_id, file, file_bytes))
    return UploadAssetResponse.model_validate(result)


@router.delete("/{asset_id}", response_model=DeleteAssetResponse)
async def delete_asset(use_case: delete_asset_dep, project_id: UUID, asset_id: UUID):
    result = await use_case.execute(get_delete_asset_input_dto(project_id, asset_id))
    return DeleteAssetResponse.model_validate(result)
