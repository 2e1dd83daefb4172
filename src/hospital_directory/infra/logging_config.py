"""Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)`` and pass structured
context with ``extra={...}``; this only decides level and format.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level() -> int:
    raw = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    logging.basicConfig(format=LOG_FORMAT, level=log_level(), stream=sys.stdout)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
