from __future__ import annotations

import logging
from pathlib import PurePosixPath
from uuid import uuid4

import anyio

from sitesmith.backend.app.application.assets.dto import UploadAssetInputDTO, UploadAssetOutputDTO
from sitesmith.backend.app.application.assets.interfaces import Captioner, ImageProcessor
from sitesmith.backend.app.application.common.upstream import bounded
from sitesmith.backend.app.application.projects.mappers import asset_domain_to_dto
from sitesmith.backend.app.domain.files.interfaces import ObjectStore
from sitesmith.backend.app.domain.projects.entities import Asset
from sitesmith.backend.app.domain.projects.errors import (
    FailedToUploadAsset,
    InvalidImage,
    ProjectHasNoDomain,
    ProjectNotFound,
    UnsupportedMediaType,
)
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import SiteLayout

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = frozenset({"image/png", "image/jpeg", "image/gif", "image/webp"})
CAPTION_PLACEHOLDER = "No caption available"


class UploadAssetUseCase:
    def __init__(
        self,
        project_repo: ProjectRepository,
        object_store: ObjectStore,
        image_processor: ImageProcessor,
        captioner: Captioner,
        layout: SiteLayout,
        *,
        timeout_s: float,
    ) -> None:
        self._project_repo = project_repo
        self._object_store = object_store
        self._image_processor = image_processor
        self._captioner = captioner
        self._layout = layout
        self._timeout_s = timeout_s

    async def execute(self, dto: UploadAssetInputDTO) -> UploadAssetOutputDTO:
        # 1) Validate the declared type
        if dto.content_type not in ALLOWED_CONTENT_TYPES:
            raise UnsupportedMediaType(dto.content_type)

        project = await self._project_repo.get(dto.project_id)
        if not project:
            raise ProjectNotFound(project_id=str(dto.project_id))
        if not project.domain:
            raise ProjectHasNoDomain(str(project.id))
        domain = project.domain

        # 2) Geometry
        try:
            geometry = await anyio.to_thread.run_sync(self._image_processor.inspect, dto.content)
        except Exception as e:
            logger.error("Failed to read image metadata for %s: %s", dto.filename, e)
            raise InvalidImage(dto.filename) from e

        # 3) Caption; cosmetic, so failures fall back to a placeholder
        try:
            caption = await bounded(
                lambda: self._captioner.caption(dto.content, dto.content_type),
                timeout_s=self._timeout_s,
            )
        except Exception as e:
            logger.warning("Failed to generate caption for %s: %s", dto.filename, e)
            caption = CAPTION_PLACEHOLDER
        description = geometry.describe(caption.strip() or CAPTION_PLACEHOLDER)

        # 4) Normalize and embed the description
        try:
            normalized = await anyio.to_thread.run_sync(
                lambda: self._image_processor.normalize(dto.content, description=description)
            )
        except Exception as e:
            logger.error("Failed to process image %s: %s", dto.filename, e)
            raise InvalidImage(dto.filename) from e

        # 5) Name, upload and record under the project lock so a filename is never handed out twice
        async with self._project_repo.lock(dto.project_id):
            project = await self._project_repo.get(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=str(dto.project_id))

            filename = _normalized_filename(dto.filename, normalized.extension)
            if project.has_asset_filename(filename):
                stem = PurePosixPath(filename).stem
                filename = f"{stem}-{uuid4().hex[:8]}{normalized.extension}"

            key = self._layout.asset_key(domain, filename)
            try:
                await bounded(
                    lambda: self._object_store.put(key, normalized.content, normalized.content_type),
                    timeout_s=self._timeout_s,
                )
            except Exception as e:
                logger.error("Failed to upload asset %s: %s", key, e)
                raise FailedToUploadAsset(filename) from e

            asset = Asset(
                filename=filename,
                url=SiteLayout.asset_url(domain, filename),
                content_type=normalized.content_type,
                description=description,
            )
            project.add_asset(asset)
            try:
                await self._project_repo.update(project.id, assets=project.assets)
            except Exception:
                await self._discard_upload(key)
                raise

        logger.info("Uploaded asset %s for project %s", filename, project.id)
        return UploadAssetOutputDTO(
            success=True,
            message="File uploaded",
            asset=asset_domain_to_dto(asset),
        )

    async def _discard_upload(self, key: str) -> None:
        # the record was never written, so nothing else refers to the object
        try:
            await bounded(lambda: self._object_store.delete(key), timeout_s=self._timeout_s)
        except Exception as e:
            logger.warning("Could not remove orphaned upload %s: %s", key, e)


def _normalized_filename(original: str, extension: str) -> str:
    name = PurePosixPath((original or "").replace("\\", "/")).name or "upload"
    return str(PurePosixPath(name).with_suffix(extension))
