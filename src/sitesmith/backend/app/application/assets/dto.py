from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UploadAssetInputDTO:
    project_id: UUID
    content: bytes
    filename: str
    content_type: str


@dataclass(frozen=True)
class DeleteAssetInputDTO:
    project_id: UUID
    asset_id: UUID


@dataclass(frozen=True)
class ListAssetsInputDTO:
    project_id: UUID


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class AssetDTO:
    id: UUID
    url: str
    filename: str
    content_type: str
    description: str
    uploaded_at: datetime


@dataclass(frozen=True)
class UploadAssetOutputDTO:
    success: bool
    message: str
    asset: AssetDTO


@dataclass(frozen=True)
class DeleteAssetOutputDTO:
    success: bool
    message: str
    asset_id: UUID
