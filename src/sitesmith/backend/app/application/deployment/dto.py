from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PublishVersionInputDTO:
    project_id: UUID
    version_index: int


@dataclass(frozen=True)
class PublishResultDTO:
    success: bool
    message: str
    url: str
    domain: str
    version_index: int
