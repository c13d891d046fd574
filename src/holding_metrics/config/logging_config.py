"""Logging configuration."""

import logging
import sys
from typing import Optional

from holding_metrics.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the service.

    level overrides settings.log_level; unknown level names fall back to INFO.
    """
    name = (level or get_settings().log_level).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # basicConfig is a no-op once the root logger has handlers (uvicorn, pytest)
    logging.getLogger("holding_metrics").setLevel(resolved)

    # Price fetches and cache writes log at DEBUG in these libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
