from __future__ import annotations

import logging
import sys

from simple_tags.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "simple_tags"

# Chatty transports under the Supabase client
_QUIET_LOGGERS = ("httpx", "httpcore", "postgrest", "hpack")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the package logger.

    Only the ``simple_tags`` logger is touched; the host application's root
    configuration is left alone. Calling it again updates the level without
    stacking handlers.
    """
    name = (level or settings.log_level).upper()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, name, logging.INFO))

    if not any(getattr(h, "_simple_tags", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._simple_tags = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)

    for quiet in _QUIET_LOGGERS:
        logging.getLogger(quiet).setLevel(logging.WARNING)

    package_logger.debug("Logging configured", extra={"level": name})
    return package_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
