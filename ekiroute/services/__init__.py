"""
Business logic services
"""

from ekiroute.services.route_engine import RouteEngine, build_route_engine
from ekiroute.services.route_search_service import RouteSearchService
from ekiroute.services.station_search_service import StationSearchService
from ekiroute.services.line_service import LineService
from ekiroute.services.search_runner import SearchRunner, SearchHandle

__all__ = [
    "RouteEngine",
    "build_route_engine",
    "RouteSearchService",
    "StationSearchService",
    "LineService",
    "SearchRunner",
    "SearchHandle",
]
