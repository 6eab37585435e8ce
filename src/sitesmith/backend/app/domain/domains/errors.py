from sitesmith.backend.app.domain.common.errors import UpstreamUnavailable


class DomainRegistryError(UpstreamUnavailable):
    def __init__(self, operation: str, hostname: str, reason: str = ""):
        message = f"Domain registry {operation} failed for {hostname}"
        super().__init__(f"{message}: {reason}" if reason else message)
