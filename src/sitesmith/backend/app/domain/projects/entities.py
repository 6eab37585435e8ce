# sitesmith/backend/app/domain/projects/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from .errors import AssetNotFound, InvalidVersionIndex, VersionNotFound
from ..common import utcnow


@dataclass
class HtmlVersion:
    content: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class Asset:
    filename: str
    url: str
    content_type: str
    description: str
    id: UUID = field(default_factory=uuid4)
    uploaded_at: datetime = field(default_factory=utcnow)


@dataclass
class Project:
    domain: Optional[str]
    versions: list[HtmlVersion] = field(default_factory=list)
    deployed_index: Optional[int] = None
    assets: list[Asset] = field(default_factory=list)
    conversation: list[dict[str, Any]] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)

    # ---------- versions ----------

    def append_version(self, content: str) -> HtmlVersion:
        version = HtmlVersion(content=content)
        self.versions.append(version)
        return version

    def version_at(self, index: int) -> HtmlVersion:
        if not 0 <= index < len(self.versions):
            raise InvalidVersionIndex(index, len(self.versions))
        return self.versions[index]

    def find_version(self, version_id: UUID) -> HtmlVersion:
        for version in self.versions:
            if version.id == version_id:
                return version
        raise VersionNotFound(str(version_id))

    def edit_version_in_place(self, index: int, content: str) -> HtmlVersion:
        """
        Overwrite the content of an existing version. Id and timestamp are kept,
        no new history entry is created.
        """
        version = self.version_at(index)
        version.content = content
        return version

    @property
    def latest_index(self) -> Optional[int]:
        return len(self.versions) - 1 if self.versions else None

    def current_index(self) -> Optional[int]:
        if self.deployed_index is not None:
            return self.deployed_index
        return self.latest_index

    def current_version(self) -> Optional[HtmlVersion]:
        index = self.current_index()
        return self.versions[index] if index is not None else None

    def mark_deployed(self, index: int) -> None:
        self.version_at(index)
        self.deployed_index = index

    # ---------- assets ----------

    def add_asset(self, asset: Asset) -> None:
        self.assets.append(asset)

    def find_asset(self, asset_id: UUID) -> Asset:
        for asset in self.assets:
            if asset.id == asset_id:
                return asset
        raise AssetNotFound(str(asset_id))

    def remove_asset(self, asset_id: UUID) -> Asset:
        asset = self.find_asset(asset_id)
        self.assets = [a for a in self.assets if a.id != asset_id]
        return asset

    def has_asset_filename(self, filename: str) -> bool:
        return any(a.filename == filename for a in self.assets)

    def select_assets(self, asset_ids: list[UUID]) -> list[Asset]:
        wanted = set(asset_ids)
        return [a for a in self.assets if a.id in wanted]
