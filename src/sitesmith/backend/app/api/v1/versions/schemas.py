from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field



class HtmlVersionResponse(BaseModel):
    id: UUID
    index: int
    content: str
    created_at: datetime
    is_deployed: bool

    model_config = ConfigDict(from_attributes=True)


class HtmlContentRequest(BaseModel):
    content: str = Field(min_length=1)


class VersionWriteResponse(BaseModel):
    success: bool
    message: str
    version_id: UUID
    version_index: int

    model_config = ConfigDict(from_attributes=True)
