"""
pydantic models (데이터셋, 응답) 와 도메인 객체
"""

from ekiroute.models.dataset import Station, Connection, Line, RailwayDataset
from ekiroute.models.domain import (
    Edge,
    PathStep,
    Path,
    RouteStop,
    RouteStopStatus,
    CandidateRoute,
    VisitStatus,
)
from ekiroute.models.responses import RouteSummary

__all__ = [
    "Station",
    "Connection",
    "Line",
    "RailwayDataset",
    "Edge",
    "PathStep",
    "Path",
    "RouteStop",
    "RouteStopStatus",
    "CandidateRoute",
    "VisitStatus",
    "RouteSummary",
]
