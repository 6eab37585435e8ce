# sitesmith/backend/app/domain/common/errors.py
"""
Error families shared by every domain package.

Concrete errors subclass one of these so the API layer can map a whole family
to a status code without knowing every specific class.
"""


class NotFound(Exception):
    pass


class ValidationError(Exception):
    pass


class DeploymentFailed(Exception):
    pass


class UpstreamUnavailable(Exception):
    pass


class PersistenceFailed(Exception):
    pass
