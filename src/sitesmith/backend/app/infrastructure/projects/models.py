# sitesmith/backend/app/infrastructure/projects/models.py
"""
On-disk record shapes for the JSON project store.

Fields added later must carry a default so files written by older versions
still load.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class HtmlVersionRecord(BaseModel):
    id: UUID
    content: str
    created_at: datetime

    model_config = ConfigDict(extra="ignore")


class AssetRecord(BaseModel):
    id: UUID
    url: str
    filename: str
    uploaded_at: datetime
    content_type: str = "image/webp"
    description: str = ""

    model_config = ConfigDict(extra="ignore")


class ProjectRecord(BaseModel):
    id: UUID
    created_at: datetime
    domain: Optional[str] = None
    versions: list[HtmlVersionRecord] = Field(default_factory=list)
    deployed_index: Optional[int] = None
    assets: list[AssetRecord] = Field(default_factory=list)
    conversation: list[dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


ProjectCollection = TypeAdapter(dict[str, ProjectRecord])
