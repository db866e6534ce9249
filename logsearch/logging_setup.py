"""Shared logging configuration for the service and the terminal client."""
from __future__ import annotations

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    # ``force=True`` replaces handlers installed by uvicorn so our format wins.
    log_level = logging.getLevelName((level or settings.log_level).upper())
    logging.basicConfig(level=log_level, format=LOG_FORMAT, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx"):
        logging.getLogger(name).setLevel(log_level)
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(log_level))
