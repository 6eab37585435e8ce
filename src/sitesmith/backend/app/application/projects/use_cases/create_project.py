from __future__ import annotations

import logging
from typing import Callable

from sitesmith.backend.app.application.common.upstream import bounded
from sitesmith.backend.app.application.projects.dto import CreatedProjectDTO
from sitesmith.backend.app.domain.domains.interfaces import DomainRegistry
from sitesmith.backend.app.domain.projects.errors import DomainRegistrationFailed
from sitesmith.backend.app.domain.projects.repositories import ProjectRepository
from sitesmith.backend.app.domain.projects.value_objects import SiteLayout

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    def __init__(
        self,
        project_repo: ProjectRepository,
        domain_registry: DomainRegistry,
        hostname_factory: Callable[[], str],
        *,
        timeout_s: float,
    ) -> None:
        self._project_repo = project_repo
        self._domain_registry = domain_registry
        self._hostname_factory = hostname_factory
        self._timeout_s = timeout_s

    async def execute(self) -> CreatedProjectDTO:
        hostname = self._hostname_factory()

        # 1) Allocate the public hostname; nothing is persisted if this fails
        try:
            await bounded(lambda: self._domain_registry.register(hostname), timeout_s=self._timeout_s)
        except Exception as e:
            logger.error("Domain registration failed for %s: %s", hostname, e)
            raise DomainRegistrationFailed(hostname) from e

        # 2) Persist the record
        try:
            project = await self._project_repo.create(hostname)
        except Exception:
            # store failed -> release the domain, then re-raise the store error
            try:
                await bounded(lambda: self._domain_registry.unregister(hostname), timeout_s=self._timeout_s)
            except Exception as cleanup_error:
                logger.warning("Could not release domain %s after failed create: %s", hostname, cleanup_error)
            raise

        logger.info("Created project %s on %s", project.id, hostname)
        return CreatedProjectDTO(
            success=True,
            message="Project created successfully",
            id=project.id,
            domain=hostname,
            url=SiteLayout.site_url(hostname),
        )
