from typing import Annotated, Callable

from fastapi import Depends

from sitesmith.backend.app.application.projects.use_cases import CreateProjectUseCase, DeleteProjectUseCase, \
    GetProjectUseCase, ListProjectsUseCase, ReplaceConversationUseCase
from sitesmith.backend.app.core import settings
from sitesmith.backend.app.core.deps import get_domain_registry, get_hostname_factory, get_object_store, \
    get_project_repository, get_site_layout
from sitesmith.backend.app.domain.domains import DomainRegistry
from sitesmith.backend.app.domain.files import ObjectStore
from sitesmith.backend.app.domain.projects import ProjectRepository, SiteLayout

project_repo_dep = Annotated[ProjectRepository, Depends(get_project_repository)]


async def get_create_project_use_case(
        repo: project_repo_dep,
        registry: Annotated[DomainRegistry, Depends(get_domain_registry)],
        hostname_factory: Annotated[Callable[[], str], Depends(get_hostname_factory)],
) -> CreateProjectUseCase:
    return CreateProjectUseCase(repo, registry, hostname_factory, timeout_s=settings.UPSTREAM_TIMEOUT_S)


async def get_get_project_use_case(repo: project_repo_dep) -> GetProjectUseCase:
    return GetProjectUseCase(repo)


async def get_list_projects_use_case(repo: project_repo_dep) -> ListProjectsUseCase:
    return ListProjectsUseCase(repo)


async def get_delete_project_use_case(
        repo: project_repo_dep,
        storage: Annotated[ObjectStore, Depends(get_object_store)],
        registry: Annotated[DomainRegistry, Depends(get_domain_registry)],
        layout: Annotated[SiteLayout, Depends(get_site_layout)],
) -> DeleteProjectUseCase:
    return DeleteProjectUseCase(repo, storage, registry, layout, timeout_s=settings.UPSTREAM_TIMEOUT_S)


async def get_replace_conversation_use_case(repo: project_repo_dep) -> ReplaceConversationUseCase:
    return ReplaceConversationUseCase(repo)
