import logging
from typing import List, Optional, Sequence, Tuple, Union

from ekiroute.core.config import settings
from ekiroute.db.network_graph import NetworkGraph
from ekiroute.models.domain import Path, RouteStop, RouteStopStatus

logger = logging.getLogger(__name__)

PathLike = Union[Path, Sequence[Tuple[str, str]]]


class RouteMaterializer:
    """경로 (역 ID + 노선) => 출발/환승/통과/도착 정보가 붙은 RouteStop 리스트"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def materialize(self, path: PathLike) -> Optional[List[RouteStop]]:
        """
        Args:
            path: Path 또는 [(station_id, line), ...] (첫 역의 line은 "")

        Returns:
            RouteStop 리스트, 빈 경로면 None
        """
        pairs = path.as_pairs() if isinstance(path, Path) else list(path)
        if not pairs:
            return None

        stops: List[RouteStop] = []
        current_line: Optional[str] = None
        last_index = len(pairs) - 1

        for index, (station_id, line) in enumerate(pairs):
            station = self.graph.get_station(station_id)
            if station is None:
                logger.debug(f"경로에 알 수 없는 역 포함, 건너뜀: {station_id}")
                continue

            is_first = index == 0
            is_last = index == last_index

            # 이 역으로 들어올 때의 노선
            if line:
                current_line = line

            # 다음 역으로 가는 노선이 지금과 다르면 환승역
            is_transfer = False
            if not is_first and not is_last and current_line is not None:
                next_line = pairs[index + 1][1]
                if next_line and next_line != current_line:
                    is_transfer = True

            if is_first:
                status = RouteStopStatus.DEPARTURE
            elif is_last:
                status = RouteStopStatus.ARRIVAL
            elif is_transfer:
                status = RouteStopStatus.TRANSFER
            else:
                status = RouteStopStatus.PASS

            alternatives: List[str] = []
            if not is_last:
                alternatives = self.alternative_lines(station_id, pairs[index + 1][0])

            stops.append(
                RouteStop(
                    station_id=station.id,
                    station_name=station.name,
                    prefecture=station.prefecture,
                    latitude=station.latitude,
                    longitude=station.longitude,
                    status=status,
                    line=current_line,
                    alternative_lines=alternatives,
                )
            )

        return stops or None

    def alternative_lines(self, from_id: str, to_id: str) -> List[str]:
        """두 역 사이를 직접 잇는 모든 노선 (인접 리스트 순서, 중복 제거)"""
        lines: List[str] = []
        for edge in self.graph.neighbors(from_id):
            if edge.neighbor == to_id and edge.line not in lines:
                lines.append(edge.line)
        return lines

    def route_duration(self, stops: Sequence[RouteStop]) -> int:
        """
        경로 총 소요시간 (분)

        각 구간은 실제로 탄 노선의 구간 시간, 노선이 안 맞으면 그 역으로 가는 첫 구간,
        인접 리스트에 없는 구간(합성 도보 구간 등)은 DEFAULT_HOP_MINUTES 로 추정
        """
        if len(stops) < 2:
            return 0

        total = 0
        for current, following in zip(stops, stops[1:]):
            total += self._hop_duration(current.station_id, following.station_id, following.line)
        return total

    def _hop_duration(self, from_id: str, to_id: str, line: Optional[str]) -> int:
        candidates = [edge for edge in self.graph.neighbors(from_id) if edge.neighbor == to_id]
        if not candidates:
            return settings.DEFAULT_HOP_MINUTES

        same_line = [edge.duration for edge in candidates if edge.line == line]
        if same_line:
            return min(same_line)
        return candidates[0].duration
