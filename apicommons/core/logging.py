import logging

from apicommons.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Enable debug logging for development and test stages."""
    level = logging.DEBUG if settings.is_dev() or settings.is_test() else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("apicommons").setLevel(level)
