"""Standard library logging for the qna process.

Application events go through logfire; this only sets levels for the
records emitted by uvicorn, SQLAlchemy and httpx.
"""

import logging
import sys

from qna.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Loggers that are noisy at INFO outside debug mode
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access", "sqlalchemy.engine")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from settings.debug."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    quiet_level = logging.INFO if settings.debug else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger("qna").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured: environment=%s storage=%s level=%s",
        settings.environment,
        settings.storage.backend,
        logging.getLevelName(level),
    )
