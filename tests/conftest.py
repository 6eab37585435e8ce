import pytest

from sitesmith.backend.app.domain.projects.value_objects import SiteLayout
from tests.unit.fakes.captioner import FakeCaptioner
from tests.unit.fakes.domain_registry import FakeDomainRegistry
from tests.unit.fakes.image_processor import FakeImageProcessor
from tests.unit.fakes.object_store import FakeObjectStore
from tests.unit.fakes.project_repo import FakeProjectRepository
from tests.unit.fakes.text_generator import FakeTextGenerator


@pytest.fixture
def repo() -> FakeProjectRepository:
    return FakeProjectRepository()


@pytest.fixture
def store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def registry() -> FakeDomainRegistry:
    return FakeDomainRegistry()


@pytest.fixture
def layout() -> SiteLayout:
    return SiteLayout(prefix="website")


@pytest.fixture
def generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def captioner() -> FakeCaptioner:
    return FakeCaptioner()


@pytest.fixture
def image_processor() -> FakeImageProcessor:
    return FakeImageProcessor()
