from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class AssetRef:
    url: str
    content_type: str
    description: str


class TextGenerator(Protocol):
    """
    Authoring collaborator. Both calls return a full replacement document.
    """

    async def generate(
        self,
        *,
        current_document: Optional[str],
        instructions: str,
        context: str,
        assets: Sequence[AssetRef],
    ) -> str:
        ...

    async def patch_section(
        self,
        *,
        current_document: str,
        section_name: str,
        instructions: str,
        context: str,
        assets: Sequence[AssetRef],
    ) -> str:
        ...
