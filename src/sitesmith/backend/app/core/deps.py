from functools import lru_cache, partial
from pathlib import Path
from typing import Callable

from sitesmith.backend.app.application.assets.interfaces import Captioner, ImageProcessor
from sitesmith.backend.app.application.generation.interfaces import TextGenerator
from sitesmith.backend.app.core.config import settings
from sitesmith.backend.app.domain.domains import DomainRegistry, generate_hostname
from sitesmith.backend.app.domain.files import ObjectStore
from sitesmith.backend.app.domain.projects import ProjectRepository, SiteLayout
from sitesmith.backend.app.infrastructure.domains.http_registry import HttpDomainRegistry
from sitesmith.backend.app.infrastructure.domains.in_memory_registry import InMemoryDomainRegistry
from sitesmith.backend.app.infrastructure.files.filesystem_storage import FilesystemObjectStore
from sitesmith.backend.app.infrastructure.files.http_object_store import HttpObjectStore
from sitesmith.backend.app.infrastructure.generation.factory_openai import OpenAIGenerationFactory
from sitesmith.backend.app.infrastructure.images.pillow_processor import PillowImageProcessor
from sitesmith.backend.app.infrastructure.projects.repositories import JsonFileProjectRepository


@lru_cache
def get_project_repository() -> ProjectRepository:
    """
    Singleton project store. The in-process map is the source of truth for reads,
    so there must be exactly one instance per process.
    """
    return JsonFileProjectRepository(Path(settings.PROJECT_STORE_PATH))


@lru_cache
def get_object_store() -> ObjectStore:
    """
    Singleton object store.
    Swap implementation here (FS / HTTP storage) without touching use cases.
    """
    if settings.OBJECT_STORE_BACKEND == 'http':
        return HttpObjectStore(
            base_url=settings.OBJECT_STORE_URL,
            api_key=settings.OBJECT_STORE_API_KEY,
            bucket=settings.OBJECT_STORE_BUCKET,
            timeout_s=settings.UPSTREAM_TIMEOUT_S,
        )
    base_dir = Path(settings.OBJECT_STORE_DIR)
    base_dir.mkdir(parents=True, exist_ok=True)
    return FilesystemObjectStore(base_dir)


@lru_cache
def get_domain_registry() -> DomainRegistry:
    if settings.DOMAIN_REGISTRY_BACKEND == 'http':
        return HttpDomainRegistry(
            base_url=settings.DOMAIN_REGISTRY_URL,
            api_key=settings.DOMAIN_REGISTRY_API_KEY,
            timeout_s=settings.UPSTREAM_TIMEOUT_S,
        )
    return InMemoryDomainRegistry()


@lru_cache
def get_site_layout() -> SiteLayout:
    return SiteLayout(prefix=settings.OBJECT_KEY_PREFIX)


def get_hostname_factory() -> Callable[[], str]:
    return partial(generate_hostname, settings.DOMAIN_SUFFIX)


@lru_cache
def get_generation_factory() -> OpenAIGenerationFactory:
    if not settings.OPENAI_API_KEY:
        raise RuntimeError("OPENAI_API_KEY must be set")
    return OpenAIGenerationFactory(api_key=settings.OPENAI_API_KEY, timeout_s=settings.GENERATION_TIMEOUT_S)


@lru_cache
def get_text_generator() -> TextGenerator:
    return get_generation_factory().create_website_generator(settings.GENERATION_MODEL)


@lru_cache
def get_captioner() -> Captioner:
    return get_generation_factory().create_captioner(settings.CAPTION_MODEL)


@lru_cache
def get_image_processor() -> ImageProcessor:
    return PillowImageProcessor()
