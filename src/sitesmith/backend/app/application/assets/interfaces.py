from dataclasses import dataclass
from typing import Protocol

from sitesmith.backend.app.domain.projects.value_objects import ImageGeometry


@dataclass(frozen=True)
class NormalizedImage:
    content: bytes
    content_type: str
    extension: str  # with leading dot, e.g. ".webp"


class ImageProcessor(Protocol):
    def inspect(self, content: bytes) -> ImageGeometry:
        ...

    def normalize(self, content: bytes, *, description: str) -> NormalizedImage:
        """
        Re-encode to the canonical format and embed description as metadata.
        """
        ...


class Captioner(Protocol):
    async def caption(self, content: bytes, content_type: str) -> str:
        ...
