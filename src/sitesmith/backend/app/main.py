from contextlib import asynccontextmanager

from fastapi import FastAPI

from sitesmith.backend.app.api.v1.router import api_router
from sitesmith.backend.app.core.deps import get_domain_registry, get_object_store
from sitesmith.backend.app.core.logging_config import configure_logging
from sitesmith.backend.app.exception_handlers import register_exception_handlers


def create_app():
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # http-backed adapters own an httpx client
        for getter in (get_object_store, get_domain_registry):
            if not getter.cache_info().currsize:
                continue
            aclose = getattr(getter(), "aclose", None)
            if aclose is not None:
                await aclose()

    app = FastAPI(title="sitesmith", lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app


app = create_app()
