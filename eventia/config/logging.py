import logging
import sys
from logging import StreamHandler

from eventia.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty third-party loggers, raised to WARNING unless LOG_DB is set
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "alembic.runtime.migration")


def setup_logging() -> None:
    level = settings.LOG_LEVEL or ("DEBUG" if settings.debug else "INFO")
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
    )
    if not settings.LOG_DB:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
