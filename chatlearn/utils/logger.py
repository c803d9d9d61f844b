"""
Logging setup shared by the service entry points.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root handler once and return a named logger.

    Args:
        name: Logger name, usually ``__name__``
        level: Level name ("debug", "info", ...); defaults to settings.LOG_LEVEL
    """
    if level is None:
        from chatlearn.config import settings
        level = settings.LOG_LEVEL

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    return logging.getLogger(name)
