import pytest

from sitesmith.backend.app.domain.files.errors import ObjectNotFound, ObjectStoreError
from sitesmith.backend.app.infrastructure.files.filesystem_storage import FilesystemObjectStore

pytestmark = pytest.mark.asyncio


@pytest.fixture
def fs_store(tmp_path) -> FilesystemObjectStore:
    return FilesystemObjectStore(tmp_path)


async def test_put_overwrites_and_get_reads_back(fs_store, tmp_path):
    key = "website/a.example/index.html"

    await fs_store.put(key, b"<p>one</p>", "text/html")
    await fs_store.put(key, b"<p>two</p>", "text/html")

    assert await fs_store.get(key) == b"<p>two</p>"
    assert (tmp_path / key).read_bytes() == b"<p>two</p>"


async def test_get_missing_key(fs_store):
    with pytest.raises(ObjectNotFound):
        await fs_store.get("website/a.example/index.html")


async def test_delete_is_idempotent(fs_store):
    key = "website/a.example/assets/hero.webp"
    await fs_store.put(key, b"img", "image/webp")

    await fs_store.delete(key)
    await fs_store.delete(key)

    with pytest.raises(ObjectNotFound):
        await fs_store.get(key)


async def test_list_filters_by_prefix(fs_store):
    await fs_store.put("website/a.example/index.html", b"a", "text/html")
    await fs_store.put("website/a.example/assets/x.webp", b"x", "image/webp")
    await fs_store.put("website/b.example/index.html", b"b", "text/html")

    assert await fs_store.list("website/a.example/") == [
        "website/a.example/assets/x.webp",
        "website/a.example/index.html",
    ]


async def test_keys_cannot_escape_base_dir(fs_store):
    with pytest.raises(ObjectStoreError):
        await fs_store.put("../outside.txt", b"x", "text/plain")
