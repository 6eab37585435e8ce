from sitesmith.backend.app.domain.common.errors import NotFound, UpstreamUnavailable


class ObjectStoreError(UpstreamUnavailable):
    def __init__(self, operation: str, key: str, reason: str = ""):
        message = f"Object store {operation} failed for key '{key}'"
        super().__init__(f"{message}: {reason}" if reason else message)


class ObjectNotFound(NotFound):
    def __init__(self, key: str):
        super().__init__(f"Object '{key}' not found.")
