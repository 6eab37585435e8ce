from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AssetResponse(BaseModel):
    id: UUID
    url: str
    filename: str
    content_type: str
    description: str
    uploaded_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ListAssetsResponse(BaseModel):
    items: list[AssetResponse]


class UploadAssetResponse(BaseModel):
    success: bool
    message: str
    asset: AssetResponse

    model_config = ConfigDict(from_attributes=True)


class DeleteAssetResponse(BaseModel):
    success: bool
    message: str
    asset_id: UUID

    model_config = ConfigDict(from_attributes=True)
