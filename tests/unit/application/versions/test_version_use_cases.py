from __future__ import annotations

import asyncio
from uuid import uuid4

import pytest

from sitesmith.backend.app.application.versions.dto import (
    AppendVersionInputDTO,
    EditVersionInPlaceInputDTO,
    GetCurrentVersionInputDTO,
    GetVersionInputDTO,
    NavigateVersionsInputDTO,
)
from sitesmith.backend.app.application.versions.use_cases import (
    AppendVersionUseCase,
    EditVersionInPlaceUseCase,
    GetCurrentVersionUseCase,
    GetVersionUseCase,
    NavigateVersionsUseCase,
)
from sitesmith.backend.app.domain.common.errors import ValidationError
from sitesmith.backend.app.domain.projects.entities import Project
from sitesmith.backend.app.domain.projects.errors import (
    FailedToPersistProjects,
    InvalidVersionIndex,
    ProjectNotFound,
    VersionNotFound,
)
from sitesmith.backend.app.domain.projects.value_objects import NavigationDirection

pytestmark = pytest.mark.asyncio


def project_with(repo, *contents: str, deployed=None) -> Project:
    p = Project(domain="test-brave-eagle-4821.example")
    for c in contents:
        p.append_version(c)
    p.deployed_index = deployed
    return repo.seed(p)


async def test_append_version_adds_to_the_end(repo):
    project = project_with(repo, "<p>v0</p>")

    out = await AppendVersionUseCase(repo).execute(
        AppendVersionInputDTO(project_id=project.id, content="```html\n<p>v1</p>\n```")
    )

    assert out.success is True
    assert out.message == "HTML version added"
    assert out.version_index == 1
    saved = await repo.get(project.id)
    assert [v.content for v in saved.versions] == ["<p>v0</p>", "<p>v1</p>"]
    assert saved.versions[1].id == out.version_id


async def test_append_version_rejects_empty_content(repo):
    project = project_with(repo)
    with pytest.raises(ValidationError):
        await AppendVersionUseCase(repo).execute(AppendVersionInputDTO(project_id=project.id, content="```\n```"))
    assert (await repo.get(project.id)).versions == []


async def test_append_version_unknown_project(repo):
    with pytest.raises(ProjectNotFound):
        await AppendVersionUseCase(repo).execute(AppendVersionInputDTO(project_id=uuid4(), content="<p/>"))


async def test_append_version_persist_failure_leaves_history(repo):
    project = project_with(repo, "<p>v0</p>")
    repo.fail_writes = True

    with pytest.raises(FailedToPersistProjects):
        await AppendVersionUseCase(repo).execute(AppendVersionInputDTO(project_id=project.id, content="<p>v1</p>"))

    assert [v.content for v in (await repo.get(project.id)).versions] == ["<p>v0</p>"]


async def test_concurrent_appends_are_all_kept(repo):
    project = project_with(repo)
    uc = AppendVersionUseCase(repo)

    await asyncio.gather(
        *(uc.execute(AppendVersionInputDTO(project_id=project.id, content=f"<p>{i}</p>")) for i in range(10))
    )

    saved = await repo.get(project.id)
    assert sorted(v.content for v in saved.versions) == sorted(f"<p>{i}</p>" for i in range(10))


async def test_edit_in_place_keeps_count_and_identity(repo):
    project = project_with(repo, "a", "b", deployed=1)
    original = project.versions[1]

    out = await EditVersionInPlaceUseCase(repo).execute(
        EditVersionInPlaceInputDTO(project_id=project.id, index=1, content="b2")
    )

    saved = await repo.get(project.id)
    assert out.version_id == original.id
    assert len(saved.versions) == 2
    assert saved.versions[1].content == "b2"
    assert saved.versions[1].created_at == original.created_at
    assert saved.deployed_index == 1


async def test_edit_in_place_rejects_bad_index(repo):
    project = project_with(repo, "a")
    with pytest.raises(InvalidVersionIndex):
        await EditVersionInPlaceUseCase(repo).execute(
            EditVersionInPlaceInputDTO(project_id=project.id, index=1, content="x")
        )


async def test_get_version_by_id(repo):
    project = project_with(repo, "a", "b", deployed=0)

    out = await GetVersionUseCase(repo).execute(
        GetVersionInputDTO(project_id=project.id, version_id=project.versions[1].id)
    )

    assert out.index == 1
    assert out.content == "b"
    assert out.is_deployed is False


async def test_get_version_unknown_id(repo):
    project = project_with(repo, "a")
    with pytest.raises(VersionNotFound):
        await GetVersionUseCase(repo).execute(GetVersionInputDTO(project_id=project.id, version_id=uuid4()))


async def test_current_version_prefers_deployed(repo):
    deployed = project_with(repo, "a", "b", "c", deployed=0)
    undeployed = project_with(repo, "a", "b")
    uc = GetCurrentVersionUseCase(repo)

    assert (await uc.execute(GetCurrentVersionInputDTO(project_id=deployed.id))).content == "a"
    assert (await uc.execute(GetCurrentVersionInputDTO(project_id=undeployed.id))).content == "b"


async def test_current_version_of_empty_project(repo):
    project = project_with(repo)
    with pytest.raises(VersionNotFound):
        await GetCurrentVersionUseCase(repo).execute(GetCurrentVersionInputDTO(project_id=project.id))


@pytest.mark.parametrize(
    "start,direction,expected",
    [
        (0, NavigationDirection.PREVIOUS, 0),
        (0, NavigationDirection.NEXT, 1),
        (2, NavigationDirection.NEXT, 2),
        (2, NavigationDirection.PREVIOUS, 1),
    ],
)
async def test_navigation_is_bounded(repo, start, direction, expected):
    project = project_with(repo, "a", "b", "c")

    out = await NavigateVersionsUseCase(repo).execute(
        NavigateVersionsInputDTO(project_id=project.id, from_index=start, direction=direction)
    )

    assert out.index == expected


async def test_navigation_rejects_out_of_range_start(repo):
    project = project_with(repo, "a")
    with pytest.raises(InvalidVersionIndex):
        await NavigateVersionsUseCase(repo).execute(
            NavigateVersionsInputDTO(project_id=project.id, from_index=5, direction=NavigationDirection.NEXT)
        )
