from __future__ import annotations

from copy import deepcopy
from math import ceil
from typing import Sequence

from .dto import ProjectDTO, ProjectPageDTO
from sitesmith.backend.app.application.assets.dto import AssetDTO
from sitesmith.backend.app.application.versions.dto import HtmlVersionDTO
from sitesmith.backend.app.domain.projects.entities import Asset, HtmlVersion, Project
from sitesmith.backend.app.domain.projects.value_objects import SiteLayout


def version_domain_to_dto(project: Project, index: int) -> HtmlVersionDTO:
    version: HtmlVersion = project.versions[index]
    return HtmlVersionDTO(
        id=version.id,
        index=index,
        content=version.content,
        created_at=version.created_at,
        is_deployed=project.deployed_index == index,
    )


def asset_domain_to_dto(asset: Asset) -> AssetDTO:
    return AssetDTO(
        id=asset.id,
        url=asset.url,
        filename=asset.filename,
        content_type=asset.content_type,
        description=asset.description,
        uploaded_at=asset.uploaded_at,
    )


def project_domain_to_output_dto(project: Project) -> ProjectDTO:
    return ProjectDTO(
        id=project.id,
        created_at=project.created_at,
        domain=project.domain,
        url=SiteLayout.site_url(project.domain) if project.domain else None,
        deployed_index=project.deployed_index,
        versions=[version_domain_to_dto(project, i) for i in range(len(project.versions))],
        assets=[asset_domain_to_dto(a) for a in project.assets],
        conversation=deepcopy(project.conversation),
    )


def build_project_page(
    projects: Sequence[Project],
    *,
    total_count: int,
    page: int,
    page_size: int,
) -> ProjectPageDTO:
    return ProjectPageDTO(
        items=[project_domain_to_output_dto(p) for p in projects],
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=ceil(total_count / page_size) if page_size else 0,
    )
