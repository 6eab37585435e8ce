import logging

from sitesmith.backend.app.domain.domains.errors import DomainRegistryError

logger = logging.getLogger(__name__)


class InMemoryDomainRegistry:
    """Local development registry; hostnames live only for the process lifetime."""

    def __init__(self) -> None:
        self._hostnames: set[str] = set()

    async def register(self, hostname: str) -> None:
        if hostname in self._hostnames:
            raise DomainRegistryError("register", hostname, "already registered")
        self._hostnames.add(hostname)
        logger.info("Registered local domain %s", hostname)

    async def unregister(self, hostname: str) -> None:
        self._hostnames.discard(hostname)
        logger.info("Unregistered local domain %s", hostname)

    def __contains__(self, hostname: str) -> bool:
        return hostname in self._hostnames
