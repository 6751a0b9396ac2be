"""Logging setup shared by the bot, services and API client."""
from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None, debug: bool = False) -> logging.Logger:
    """Configure the ``repairhub`` logger once and return it.

    ``debug`` (the DEBUG setting) wins over ``level`` and LOG_LEVEL.
    """
    log = logging.getLogger("repairhub")
    resolved = "DEBUG" if debug else (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log.setLevel(getattr(logging, resolved, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
        log.propagate = False

    # aiohttp access logs are noisy at INFO
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
    return log


logger = setup_logging()
