from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from sitesmith.backend.app.api.v1.assets.schemas import AssetResponse
from sitesmith.backend.app.api.v1.versions.schemas import HtmlVersionResponse


class ProjectResponse(BaseModel):
    id: UUID
    created_at: datetime
    domain: Optional[str]
    url: Optional[str]
    deployed_index: Optional[int]
    versions: list[HtmlVersionResponse]
    assets: list[AssetResponse]
    conversation: list[dict[str, Any]]

    model_config = ConfigDict(from_attributes=True)


class ListProjectsResponse(BaseModel):
    items: list[ProjectResponse]
    page: int
    limit: int
    total_count: int
    total_pages: int


class CreateProjectResponse(BaseModel):
    success: bool
    message: str
    id: UUID
    domain: str
    url: str

    model_config = ConfigDict(from_attributes=True)


class DeleteProjectResponse(BaseModel):
    success: bool
    message: str
    failed_steps: list[str] = []

    model_config = ConfigDict(from_attributes=True)


class ReplaceConversationRequest(BaseModel):
    messages: list[dict[str, Any]]
