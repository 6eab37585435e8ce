from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class GenerateWebsiteInputDTO:
    project_id: UUID
    instructions: str
    context: str = ""
    asset_ids: list[UUID] = field(default_factory=list)
    section: Optional[str] = None
    publish: bool = True


@dataclass(frozen=True)
class GenerateWebsiteOutputDTO:
    success: bool
    message: str
    version_id: UUID
    version_index: int
    published: bool
    url: Optional[str] = None
    used_asset_ids: list[UUID] = field(default_factory=list)
