from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sitesmith.backend.app.domain.projects.value_objects import NavigationDirection


@dataclass(frozen=True)
class AppendVersionInputDTO:
    project_id: UUID
    content: str


@dataclass(frozen=True)
class GetVersionInputDTO:
    project_id: UUID
    version_id: UUID


@dataclass(frozen=True)
class EditVersionInPlaceInputDTO:
    project_id: UUID
    index: int
    content: str


@dataclass(frozen=True)
class GetCurrentVersionInputDTO:
    project_id: UUID


@dataclass(frozen=True)
class NavigateVersionsInputDTO:
    project_id: UUID
    from_index: int
    direction: NavigationDirection


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class HtmlVersionDTO:
    id: UUID
    index: int
    content: str
    created_at: datetime
    is_deployed: bool


@dataclass(frozen=True)
class AppendVersionOutputDTO:
    success: bool
    message: str
    version_id: UUID
    version_index: int


@dataclass(frozen=True)
class EditVersionInPlaceOutputDTO:
    success: bool
    message: str
    version_id: UUID
    version_index: int
