"""
Logging setup.

The engine modules only create loggers; the host application decides
when to call configure_logging.
"""

import logging
from typing import Optional

from bodycomp.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> int:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read the level from (defaults to get_settings())

    Returns:
        The numeric log level that was applied
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("bodycomp").setLevel(level)
    return level
