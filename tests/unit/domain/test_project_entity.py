from uuid import uuid4

import pytest

from sitesmith.backend.app.domain.projects.entities import Asset, Project
from sitesmith.backend.app.domain.projects.errors import AssetNotFound, InvalidVersionIndex, VersionNotFound


def make_project(*contents: str) -> Project:
    p = Project(domain="test-brave-eagle-4821.example")
    for c in contents:
        p.append_version(c)
    return p


def make_asset(filename: str = "hero.webp") -> Asset:
    return Asset(
        filename=filename,
        url=f"https://test-brave-eagle-4821.example/assets/{filename}",
        content_type="image/webp",
        description="a hero\nAspect Ratio: 16:9 (landscape)",
    )


def test_append_version_never_rewrites_history():
    p = make_project("<p>v0</p>")
    first = p.versions[0]

    p.append_version("<p>v1</p>")

    assert [v.content for v in p.versions] == ["<p>v0</p>", "<p>v1</p>"]
    assert p.versions[0] is first
    assert p.versions[0].id != p.versions[1].id


def test_current_version_prefers_deployed_pointer():
    p = make_project("a", "b", "c")
    assert p.current_index() == 2

    p.mark_deployed(0)

    assert p.current_index() == 0
    assert p.current_version().content == "a"


def test_current_version_is_none_without_versions():
    p = make_project()
    assert p.current_index() is None
    assert p.current_version() is None
    assert p.latest_index is None


def test_mark_deployed_rejects_out_of_range_and_keeps_pointer():
    p = make_project("a", "b")
    p.mark_deployed(1)

    with pytest.raises(InvalidVersionIndex):
        p.mark_deployed(2)
    with pytest.raises(InvalidVersionIndex):
        p.mark_deployed(-1)

    assert p.deployed_index == 1


def test_edit_version_in_place_keeps_identity():
    p = make_project("a", "b")
    before = p.versions[1]

    edited = p.edit_version_in_place(1, "b2")

    assert len(p.versions) == 2
    assert edited.id == before.id
    assert edited.created_at == before.created_at
    assert p.versions[1].content == "b2"


def test_find_version_unknown_id_raises():
    p = make_project("a")
    with pytest.raises(VersionNotFound):
        p.find_version(uuid4())


def test_asset_lookup_and_removal():
    p = make_project()
    hero, logo = make_asset("hero.webp"), make_asset("logo.webp")
    p.add_asset(hero)
    p.add_asset(logo)

    assert p.has_asset_filename("logo.webp")
    assert p.select_assets([logo.id, uuid4()]) == [logo]

    removed = p.remove_asset(hero.id)

    assert removed is hero
    assert p.assets == [logo]
    with pytest.raises(AssetNotFound):
        p.find_asset(hero.id)
