from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class GenerateWebsiteRequest(BaseModel):
    instructions: str = Field(min_length=1)
    context: str = ""
    asset_ids: list[UUID] = []
    section: Optional[str] = Field(default=None, min_length=1, max_length=100)
    publish: bool = True


class GenerateWebsiteResponse(BaseModel):
    success: bool
    message: str
    version_id: UUID
    version_index: int
    published: bool
    url: Optional[str] = None
    used_asset_ids: list[UUID] = []

    model_config = ConfigDict(from_attributes=True)
