from uuid import UUID

from fastapi import UploadFile

from sitesmith.backend.app.api.v1.assets.schemas import AssetResponse, ListAssetsResponse
from sitesmith.backend.app.application.assets.dto import AssetDTO, DeleteAssetInputDTO, ListAssetsInputDTO, \
    UploadAssetInputDTO


def get_upload_asset_input_dto(project_id: UUID, file: UploadFile, file_bytes: bytes) -> UploadAssetInputDTO:
    return UploadAssetInputDTO(
        project_id=project_id,
        content=file_bytes,
        filename=file.filename or "upload",
        content_type=file.content_type or "application/octet-stream",
    )


def get_delete_asset_input_dto(project_id: UUID, asset_id: UUID) -> DeleteAssetInputDTO:
    return DeleteAssetInputDTO(project_id=project_id, asset_id=asset_id)


def get_list_assets_input_dto(project_id: UUID) -> ListAssetsInputDTO:
    return ListAssetsInputDTO(project_id=project_id)


def assets_dto_to_schema(assets_dto: list[AssetDTO]) -> ListAssetsResponse:
    return ListAssetsResponse(items=[AssetResponse.model_validate(a) for a in assets_dto])
