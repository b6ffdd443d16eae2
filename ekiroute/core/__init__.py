"""
Core 설정 및 utilities, 커스텀 예외
"""

from ekiroute.core.config import settings
from ekiroute.core.logging_config import setup_logging

from ekiroute.core.exceptions import (
    EkiRouteException,
    DatasetLoadError,
    RouteNotFoundException,
    StationNotFoundException,
    InvalidLineSelectionException,
)

__all__ = [
    "settings",
    "setup_logging",
    "EkiRouteException",
    "DatasetLoadError",
    "RouteNotFoundException",
    "StationNotFoundException",
    "InvalidLineSelectionException",
]
