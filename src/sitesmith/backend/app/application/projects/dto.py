from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sitesmith.backend.app.application.assets.dto import AssetDTO
from sitesmith.backend.app.application.versions.dto import HtmlVersionDTO
from sitesmith.backend.app.domain.projects.value_objects import SortOrder


@dataclass(frozen=True)
class GetProjectInputDTO:
    project_id: UUID


@dataclass(frozen=True)
class DeleteProjectInputDTO:
    project_id: UUID


@dataclass(frozen=True)
class ListProjectsInputDTO:
    page: int = 1
    page_size: int = 10
    sort_order: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class ReplaceConversationInputDTO:
    project_id: UUID
    messages: list[dict[str, Any]]


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class ProjectDTO:
    id: UUID
    created_at: datetime
    domain: Optional[str]
    url: Optional[str]
    deployed_index: Optional[int]
    versions: list[HtmlVersionDTO]
    assets: list[AssetDTO]
    conversation: list[dict[str, Any]]


@dataclass(frozen=True)
class ProjectPageDTO:
    items: list[ProjectDTO]
    page: int
    page_size: int
    total_count: int
    total_pages: int


@dataclass(frozen=True)
class CreatedProjectDTO:
    success: bool
    message: str
    id: UUID
    domain: str
    url: str


@dataclass(frozen=True)
class DeleteProjectResultDTO:
    success: bool
    message: str
    failed_steps: list[str] = field(default_factory=list)
