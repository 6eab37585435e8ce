import logging

from sitesmith.backend.app.core.config import settings


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # request lines from httpx are noisy at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
