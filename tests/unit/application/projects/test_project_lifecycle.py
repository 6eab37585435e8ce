from __future__ import annotations

import logging
from uuid import uuid4

import pytest

from sitesmith.backend.app.application.projects.dto import (
    DeleteProjectInputDTO,
    GetProjectInputDTO,
    ListProjectsInputDTO,
    ReplaceConversationInputDTO,
)
from sitesmith.backend.app.application.projects.use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    ReplaceConversationUseCase,
)
from sitesmith.backend.app.domain.common.errors import ValidationError
from sitesmith.backend.app.domain.projects.entities import Asset, Project
from sitesmith.backend.app.domain.projects.errors import (
    DomainRegistrationFailed,
    FailedToPersistProjects,
    ProjectNotFound,
)
from sitesmith.backend.app.domain.projects.value_objects import SortOrder

pytestmark = pytest.mark.asyncio

DOMAIN = "test-brave-eagle-4821.example"


@pytest.fixture
def create_uc(repo, registry) -> CreateProjectUseCase:
    return CreateProjectUseCase(repo, registry, lambda: DOMAIN, timeout_s=1)


@pytest.fixture
def delete_uc(repo, store, registry, layout) -> DeleteProjectUseCase:
    return DeleteProjectUseCase(repo, store, registry, layout, timeout_s=1)


def seeded_project(repo, store, layout, *, assets=("hero.webp",)) -> Project:
    project = Project(domain=DOMAIN)
    project.append_version("<p>v0</p>")
    project.mark_deployed(0)
    store.seed(layout.index_key(DOMAIN), b"<p>v0</p>", "text/html")
    for name in assets:
        project.add_asset(
            Asset(filename=name, url=f"https://{DOMAIN}/assets/{name}", content_type="image/webp", description="d")
        )
        store.seed(layout.asset_key(DOMAIN, name), b"img", "image/webp")
    return repo.seed(project)


async def test_create_project_registers_domain_and_persists(create_uc, repo, registry):
    out = await create_uc.execute()

    assert out.success is True
    assert out.message == "Project created successfully"
    assert out.domain == DOMAIN
    assert out.url == f"https://{DOMAIN}"
    assert DOMAIN in registry.registered

    saved = await repo.get(out.id)
    assert saved.domain == DOMAIN
    assert saved.versions == []
    assert saved.deployed_index is None


async def test_create_project_registration_failure_persists_nothing(create_uc, repo, registry):
    registry.fail_register = True

    with pytest.raises(DomainRegistrationFailed):
        await create_uc.execute()

    assert repo.count() == 0


async def test_create_project_registration_timeout_persists_nothing(repo, registry):
    registry.hang_register = True
    uc = CreateProjectUseCase(repo, registry, lambda: DOMAIN, timeout_s=0.01)

    with pytest.raises(DomainRegistrationFailed):
        await uc.execute()

    assert repo.count() == 0


async def test_create_project_store_failure_releases_domain(create_uc, repo, registry):
    repo.fail_writes = True

    with pytest.raises(FailedToPersistProjects):
        await create_uc.execute()

    assert registry.unregister_calls == [DOMAIN]
    assert DOMAIN not in registry.registered


async def test_get_project_unknown_id(repo):
    with pytest.raises(ProjectNotFound):
        await GetProjectUseCase(repo).execute(GetProjectInputDTO(project_id=uuid4()))


async def test_get_project_maps_versions_and_pointer(repo, store, layout):
    project = seeded_project(repo, store, layout)

    out = await GetProjectUseCase(repo).execute(GetProjectInputDTO(project_id=project.id))

    assert out.url == f"https://{DOMAIN}"
    assert out.deployed_index == 0
    assert [v.is_deployed for v in out.versions] == [True]
    assert [a.filename for a in out.assets] == ["hero.webp"]


async def test_list_projects_pages_and_sorts(repo):
    created = [repo.seed(Project(domain=f"d{i}.example")) for i in range(5)]
    uc = ListProjectsUseCase(repo)

    first = await uc.execute(ListProjectsInputDTO(page=1, page_size=2, sort_order=SortOrder.ASC))
    last = await uc.execute(ListProjectsInputDTO(page=3, page_size=2, sort_order=SortOrder.ASC))

    assert first.total_count == 5
    assert first.total_pages == 3
    assert [p.id for p in first.items] == [created[0].id, created[1].id]
    assert [p.id for p in last.items] == [created[4].id]


async def test_list_projects_rejects_bad_paging(repo):
    with pytest.raises(ValidationError):
        await ListProjectsUseCase(repo).execute(ListProjectsInputDTO(page=0))


async def test_replace_conversation_stores_transcript(repo):
    project = repo.seed(Project(domain=DOMAIN))
    messages = [{"role": "user", "content": "make it blue"}]

    await ReplaceConversationUseCase(repo).execute(
        ReplaceConversationInputDTO(project_id=project.id, messages=messages)
    )

    assert (await repo.get(project.id)).conversation == messages


async def test_delete_project_removes_everything(delete_uc, repo, store, registry, layout):
    project = seeded_project(repo, store, layout, assets=("hero.webp", "logo.webp"))
    registry.registered.add(DOMAIN)
    store.seed(layout.site_prefix(DOMAIN) + "stray.txt", b"x")

    out = await delete_uc.execute(DeleteProjectInputDTO(project_id=project.id))

    assert out.success is True
    assert out.message == "Project deleted successfully"
    assert out.failed_steps == []
    assert store.keys() == []
    assert DOMAIN not in registry.registered
    assert await repo.get(project.id) is None


async def test_delete_project_reports_storage_failures_but_removes_record(delete_uc, repo, store, registry, layout):
    project = seeded_project(repo, store, layout)
    store.fail_keys.add(layout.index_key(DOMAIN))

    out = await delete_uc.execute(DeleteProjectInputDTO(project_id=project.id))

    assert out.success is True
    assert "site HTML" in out.message
    assert out.failed_steps == ["site HTML"]
    # the remaining steps were still attempted
    assert not store.exists(layout.asset_key(DOMAIN, "hero.webp"))
    assert registry.unregister_calls == [DOMAIN]
    assert await repo.get(project.id) is None


async def test_delete_project_reports_registry_failure(delete_uc, repo, store, registry, layout):
    project = seeded_project(repo, store, layout)
    registry.fail_unregister = True

    out = await delete_uc.execute(DeleteProjectInputDTO(project_id=project.id))

    assert out.failed_steps == [f"domain {DOMAIN}"]
    assert store.keys() == []
    assert await repo.get(project.id) is None


async def test_delete_project_timeouts_are_logged_and_record_still_removed(repo, store, registry, layout, caplog):
    project = seeded_project(repo, store, layout)
    registry.registered.add(DOMAIN)
    store.hang_ops.add("delete")
    registry.hang_unregister = True
    uc = DeleteProjectUseCase(repo, store, registry, layout, timeout_s=0.01)
    caplog.set_level(logging.ERROR)

    out = await uc.execute(DeleteProjectInputDTO(project_id=project.id))

    assert out.success is True
    assert out.failed_steps == ["site HTML", "asset objects (1 of 1)", f"domain {DOMAIN}"]
    assert f"Failed to delete object {layout.index_key(DOMAIN)}" in caplog.text
    assert f"Failed to unregister domain {DOMAIN}" in caplog.text
    assert await repo.get(project.id) is None


async def test_delete_project_counts_asset_failures(delete_uc, repo, store, layout):
    project = seeded_project(repo, store, layout, assets=("a.webp", "b.webp"))
    store.fail_keys.add(layout.asset_key(DOMAIN, "b.webp"))

    out = await delete_uc.execute(DeleteProjectInputDTO(project_id=project.id))

    assert out.failed_steps == ["asset objects (1 of 2)"]
    assert await repo.get(project.id) is None


async def test_delete_project_without_domain_skips_upstream(delete_uc, repo, store, registry):
    project = repo.seed(Project(domain=None))

    out = await delete_uc.execute(DeleteProjectInputDTO(project_id=project.id))

    assert out.failed_steps == []
    assert store.delete_log == []
    assert registry.unregister_calls == []
    assert await repo.get(project.id) is None


async def test_delete_project_unknown_id(delete_uc):
    with pytest.raises(ProjectNotFound):
        await delete_uc.execute(DeleteProjectInputDTO(project_id=uuid4()))
