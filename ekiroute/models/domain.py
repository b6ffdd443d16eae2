import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ekiroute.core.config import ROUTE_STOP_DISPLAY_NAMES

# domain 정의


@dataclass(frozen=True, slots=True)
class Edge:
    neighbor: str
    line: str
    duration: int


@dataclass(frozen=True, slots=True)
class PathStep:
    station_id: str
    line: str  # 이 역으로 들어올 때 탄 노선 (출발역은 "")
    duration: int  # 직전 역에서 걸린 시간


@dataclass
class Path:
    steps: List[PathStep]
    total_duration: int

    @property
    def station_ids(self) -> List[str]:
        return [step.station_id for step in self.steps]

    def as_pairs(self) -> List[Tuple[str, str]]:
        """(station_id, line) 리스트"""
        return [(step.station_id, step.line) for step in self.steps]


class VisitStatus(str, enum.Enum):
    """방문 기록 상태 (strength: home > visited > transferred > passed)"""

    HOME = "home"
    VISITED = "visited"
    TRANSFERRED = "transferred"
    PASSED = "passed"

    @property
    def strength(self) -> int:
        return _VISIT_STRENGTH[self]

    def stronger(self, other: "VisitStatus") -> "VisitStatus":
        return self if self.strength >= other.strength else other


_VISIT_STRENGTH = {
    VisitStatus.HOME: 4,
    VisitStatus.VISITED: 3,
    VisitStatus.TRANSFERRED: 2,
    VisitStatus.PASSED: 1,
}


class RouteStopStatus(str, enum.Enum):
    DEPARTURE = "departure"
    ARRIVAL = "arrival"
    TRANSFER = "transfer"
    PASS = "pass"

    @property
    def display_name(self) -> str:
        return ROUTE_STOP_DISPLAY_NAMES[self.value]

    @property
    def visit_status(self) -> VisitStatus:
        if self is RouteStopStatus.TRANSFER:
            return VisitStatus.TRANSFERRED
        if self is RouteStopStatus.PASS:
            return VisitStatus.PASSED
        return VisitStatus.VISITED


@dataclass(frozen=True)
class RouteStop:
    station_id: str
    station_name: str
    prefecture: str
    latitude: float
    longitude: float
    status: RouteStopStatus
    line: Optional[str] = None
    alternative_lines: List[str] = field(default_factory=list)

    @property
    def visit_status(self) -> VisitStatus:
        return self.status.visit_status


@dataclass
class CandidateRoute:
    stops: List[RouteStop]
    total_duration: int
    transfer_count: int

    def score(self, transfer_penalty: int) -> int:
        """소요시간 + 환승 페널티 (낮을수록 좋음)"""
        return self.total_duration + self.transfer_count * transfer_penalty

    @property
    def station_ids(self) -> List[str]:
        return [stop.station_id for stop in self.stops]
