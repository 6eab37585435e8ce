from typing import Annotated

from fastapi import Depends

from sitesmith.backend.app.application.versions.use_cases import AppendVersionUseCase, EditVersionInPlaceUseCase, \
    GetCurrentVersionUseCase, GetVersionUseCase, NavigateVersionsUseCase
from sitesmith.backend.app.core.deps import get_project_repository
from sitesmith.backend.app.domain.projects import ProjectRepository

project_repo_dep = Annotated[ProjectRepository, Depends(get_project_repository)]


async def get_append_version_use_case(repo: project_repo_dep) -> AppendVersionUseCase:
    return AppendVersionUseCase(repo)


async def get_edit_version_use_case(repo: project_repo_dep) -> EditVersionInPlaceUseCase:
    return EditVersionInPlaceUseCase(repo)


async def get_get_version_use_case(repo: project_repo_dep) -> GetVersionUseCase:
    return GetVersionUseCase(repo)


async def get_current_version_use_case(repo: project_repo_dep) -> GetCurrentVersionUseCase:
    return GetCurrentVersionUseCase(repo)


async def get_navigate_versions_use_case(repo: project_repo_dep) -> NavigateVersionsUseCase:
    return NavigateVersionsUseCase(repo)
