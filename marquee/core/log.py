"""Logging setup shared by the app factory and the maintenance scripts."""
from __future__ import annotations

import logging

from .config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "marquee-stream"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach one stream handler to the package logger; safe to call twice."""
    settings = settings or get_settings()
    logger = logging.getLogger("marquee")
    logger.setLevel(settings.log_level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
