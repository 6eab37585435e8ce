import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sitesmith.backend.app.domain.common.errors import DeploymentFailed, NotFound, PersistenceFailed, \
    UpstreamUnavailable, ValidationError
from sitesmith.backend.app.domain.projects.errors import UnsupportedMediaType

logger = logging.getLogger(__name__)


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    # handlers are resolved along the exception MRO, so the base classes cover their subclasses

    @app.exception_handler(NotFound)
    async def not_found(_: Request, exc: NotFound):
        return _failure(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(UnsupportedMediaType)
    async def unsupported_media_type(_: Request, exc: UnsupportedMediaType):
        return _failure(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, str(exc))

    @app.exception_handler(ValidationError)
    async def validation_error(_: Request, exc: ValidationError):
        return _failure(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(DeploymentFailed)
    async def deployment_failed(_: Request, exc: DeploymentFailed):
        return _failure(status.HTTP_502_BAD_GATEWAY, str(exc))

    @app.exception_handler(UpstreamUnavailable)
    async def upstream_unavailable(_: Request, exc: UpstreamUnavailable):
        return _failure(status.HTTP_502_BAD_GATEWAY, str(exc))

    @app.exception_handler(PersistenceFailed)
    async def persistence_failed(_: Request, exc: PersistenceFailed):
        logger.error("Persistence failure: %s", exc)
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Failed to save project data")
