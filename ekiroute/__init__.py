"""
EkiRoute - 철도 네트워크 경로 탐색 엔진

역 방문 기록 앱에서 사용하는 출발역 → 도착역 복수 경로 탐색
"""

from ekiroute.core.config import settings
from ekiroute.db.network_graph import NetworkGraph, load_network
from ekiroute.models.domain import RouteStop, RouteStopStatus
from ekiroute.services.route_engine import RouteEngine, build_route_engine

__version__ = settings.VERSION

__all__ = [
    "settings",
    "NetworkGraph",
    "load_network",
    "RouteStop",
    "RouteStopStatus",
    "RouteEngine",
    "build_route_engine",
]
