"""
Logging configuration shared by the Streamlit app and scripts.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging once per process.

    Args:
        level: Log level name; defaults to LOG_LEVEL from the environment
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    # SQL echo stays off unless explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
