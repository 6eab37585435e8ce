from fastapi import APIRouter

from sitesmith.backend.app.api.v1.assets import router as assets_router
from sitesmith.backend.app.api.v1.deployment import router as deployment_router
from sitesmith.backend.app.api.v1.generation import router as generation_router
from sitesmith.backend.app.api.v1.projects import router as project_router
from sitesmith.backend.app.api.v1.versions import router as versions_router

api_router = APIRouter()
api_router.include_router(project_router.router)
api_router.include_router(versions_router.router)
api_router.include_router(deployment_router.router)
api_router.include_router(assets_router.router)
api_router.include_router(generation_router.router)
