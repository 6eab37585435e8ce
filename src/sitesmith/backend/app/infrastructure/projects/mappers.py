from sitesmith.backend.app.domain.projects.entities import Asset, HtmlVersion, Project
from sitesmith.backend.app.infrastructure.projects.models import AssetRecord, HtmlVersionRecord, ProjectRecord


def version_record_to_domain(r: HtmlVersionRecord) -> HtmlVersion:
    return HtmlVersion(id=r.id, content=r.content, created_at=r.created_at)


def asset_record_to_domain(r: AssetRecord) -> Asset:
    return Asset(
        id=r.id,
        url=r.url,
        filename=r.filename,
        uploaded_at=r.uploaded_at,
        content_type=r.content_type,
        description=r.description,
    )


def project_record_to_domain(r: ProjectRecord) -> Project:
    versions = [version_record_to_domain(v) for v in r.versions]
    deployed_index = r.deployed_index
    # a pointer past the end can only come from a hand-edited file
    if deployed_index is not None and not 0 <= deployed_index < len(versions):
        deployed_index = None
    return Project(
        id=r.id,
        created_at=r.created_at,
        domain=r.domain,
        versions=versions,
        deployed_index=deployed_index,
        assets=[asset_record_to_domain(a) for a in r.assets],
        conversation=list(r.conversation),
    )


def project_domain_to_record(p: Project) -> ProjectRecord:
    return ProjectRecord(
        id=p.id,
        created_at=p.created_at,
        domain=p.domain,
        versions=[
            HtmlVersionRecord(id=v.id, content=v.content, created_at=v.created_at)
            for v in p.versions
        ],
        deployed_index=p.deployed_index,
        assets=[
            AssetRecord(
                id=a.id,
                url=a.url,
                filename=a.filename,
                uploaded_at=a.uploaded_at,
                content_type=a.content_type,
                description=a.description,
            )
            for a in p.assets
        ],
        conversation=list(p.conversation),
    )
