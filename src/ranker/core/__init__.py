"""Core utilities for the ranker query layer."""

from ranker.core.config import RankerConfig
from ranker.core.exceptions import InvalidCriteriaError, NotFoundError, RankerError
from ranker.core.logging import Logger, color_palette, log

__all__ = [
    "RankerConfig",
    "RankerError",
    "NotFoundError",
    "InvalidCriteriaError",
    "Logger",
    "log",
    "color_palette",
]
