"""
다익스트라 경로 탐색 및 경로 가공 유틸리티
"""

from ekiroute.algorithms.path_finder import PathFinder, edge_key
from ekiroute.algorithms.route_materializer import RouteMaterializer
from ekiroute.algorithms.distance_calculator import DistanceCalculator

__all__ = [
    "PathFinder",
    "edge_key",
    "RouteMaterializer",
    "DistanceCalculator",
]
