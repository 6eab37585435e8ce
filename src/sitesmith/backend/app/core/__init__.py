from sitesmith.backend.app.core.config import settings
from sitesmith.backend.app.core.deps import get_project_repository

__all__ = ['settings',
           'get_project_repository']
