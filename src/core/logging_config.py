# core/logging_config.py
import logging
from typing import Optional

from core.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None, name: str = "") -> logging.Logger:
    """
    Install a console handler on the given logger (root by default).

    Calling it again only updates the level, so repeated CLI invocations in
    one process do not stack handlers.
    """
    if level is None:
        level = LOG_LEVEL
    numeric = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric)
    if not any(getattr(h, "_tracing_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tracing_handler = True
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(numeric)
    return logger
