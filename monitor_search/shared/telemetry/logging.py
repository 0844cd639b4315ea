"""Logging setup for the search service.

One stdout handler on the root logger. The ``monitor_search`` loggers follow
``settings.debug``; the store loggers stay quiet unless ``database_echo`` asks
for SQL statements.
"""

import logging
import sys

from monitor_search.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SERVICE_LOGGER = "monitor_search"

# Engine and driver loggers; LIKE scans over issue bodies make them chatty.
STORE_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "aiomysql", "asyncpg")


def setup_logging(settings: Settings) -> int:
    """Configure logging for the service and return the service log level.

    Query text is only ever logged at DEBUG, so it reaches the output only
    when settings.debug is True.
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(SERVICE_LOGGER).setLevel(level)
    store_level = logging.INFO if settings.database_echo else logging.WARNING
    for name in STORE_LOGGERS:
        logging.getLogger(name).setLevel(store_level)
    return level
