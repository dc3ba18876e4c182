import logging

from .settings import Settings, settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("factcheck")

from .constants import (
    TEXT_CONFIG,
    RELEVANCE_CONFIG,
    RANKING_CONFIG,
    CONFIDENCE_CONFIG,
    SOURCE_RELIABILITY,
    SOURCE_TIMEOUTS,
    SOURCE_CATEGORY_WEIGHTS,
)

__all__ = [
    "logger",
    "Settings",
    "settings",
    "TEXT_CONFIG",
    "RELEVANCE_CONFIG",
    "RANKING_CONFIG",
    "CONFIDENCE_CONFIG",
    "SOURCE_RELIABILITY",
    "SOURCE_TIMEOUTS",
    "SOURCE_CATEGORY_WEIGHTS",
]
