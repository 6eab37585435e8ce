from pydantic import BaseModel, ConfigDict, Field


class PublishRequest(BaseModel):
    version_index: int = Field(ge=0)


class PublishResponse(BaseModel):
    success: bool
    message: str
    url: str
    domain: str
    version_index: int

    model_config = ConfigDict(from_attributes=True)
