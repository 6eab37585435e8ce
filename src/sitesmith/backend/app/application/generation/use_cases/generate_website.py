from __future__ import annotations

import logging

from sitesmith.backend.app.application.common.upstream import bounded
from sitesmith.backend.app.application.deployment.dto import PublishVersionInputDTO
from sitesmith.backend.app.application.deployment.use_cases import PublishVersionUseCase
from sitesmith.backend.app.application.generation.dto import GenerateWebsiteInputDTO, GenerateWebsiteOutputDTO
from sitesmith.backend.app.application.generation.interfaces import AssetRef, TextGenerator
from sitesmith.backend.app.application.versions.dto import AppendVersionInputDTO
from sitesmith.backend.app.application.versions.use_cases import AppendVersionUseCase
from sitesmith.backend.app.domain.common.errors import DeploymentFailed, ValidationError
from sitesmith.backend.app.domain.projects.errors import GenerationFailed, ProjectNotFound
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import strip_code_fences

logger = logging.getLogger(__name__)


class GenerateWebsiteUseCase:
    """
    Chat tool entry point: produce a new document from the current one,
    store it as a new version and optionally publish it.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        text_generator: TextGenerator,
        append_version_uc: AppendVersionUseCase,
        publish_version_uc: PublishVersionUseCase,
        *,
        timeout_s: float,
    ) -> None:
        self._project_repo = project_repo
        self._text_generator = text_generator
        self._append_version_uc = append_version_uc
        self._publish_version_uc = publish_version_uc
        self._timeout_s = timeout_s

    async def execute(self, dto: GenerateWebsiteInputDTO) -> GenerateWebsiteOutputDTO:
        if not dto.instructions.strip():
            raise ValidationError("Instructions are required")

        project = await self._project_repo.get(dto.project_id)
        if not project:
            raise ProjectNotFound(project_id=str(dto.project_id))

        current = project.current_version()
        selected = project.select_assets(dto.asset_ids)
        refs = [AssetRef(url=a.url, content_type=a.content_type, description=a.description) for a in selected]

        if dto.section and current is None:
            raise ValidationError("Cannot update a section before a website exists")

        try:
            if dto.section:
                raw = await bounded(
                    lambda: self._text_generator.patch_section(
                        current_document=current.content,
                        section_name=dto.section,
                        instructions=dto.instructions,
                        context=dto.context,
                        assets=refs,
                    ),
                    timeout_s=self._timeout_s,
                )
            else:
                raw = await bounded(
                    lambda: self._text_generator.generate(
                        current_document=current.content if current else None,
                        instructions=dto.instructions,
                        context=dto.context,
                        assets=refs,
                    ),
                    timeout_s=self._timeout_s,
                )
        except TimeoutError as e:
            raise GenerationFailed(f"timed out after {self._timeout_s}s") from e
        except Exception as e:
            logger.error("Text generation failed for project %s: %s", project.id, e)
            raise GenerationFailed(str(e) or type(e).__name__) from e

        document = strip_code_fences(raw or "")
        if not document:
            raise GenerationFailed("generator returned an empty document")

        appended = await self._append_version_uc.execute(
            AppendVersionInputDTO(project_id=project.id, content=document)
        )
        message = f"Website section '{dto.section}' updated successfully!" if dto.section \
            else "Website updated successfully!"

        url = None
        published = False
        if dto.publish:
            try:
                result = await self._publish_version_uc.execute(
                    PublishVersionInputDTO(project_id=project.id, version_index=appended.version_index)
                )
                url = result.url
                published = True
            except DeploymentFailed as e:
                logger.error("Generated version %s but deployment failed: %s", appended.version_id, e)
                message += " Deployment failed; the new version was saved but is not live."

        return GenerateWebsiteOutputDTO(
            success=True,
            message=message,
            version_id=appended.version_id,
            version_index=appended.version_index,
            published=published,
            url=url,
            used_asset_ids=[a.id for a in selected],
        )
