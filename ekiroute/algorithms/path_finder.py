# 다익스트라 최단 시간 경로 탐색
import heapq
import itertools
import logging
from typing import AbstractSet, Dict, List, Optional, Tuple

from ekiroute.core.config import LIMITED_EXPRESS_MARKERS, SHINKANSEN_MARKERS, WALK_LINES
from ekiroute.db.network_graph import NetworkGraph
from ekiroute.models.domain import Path, PathStep

logger = logging.getLogger(__name__)

# 방향 무관한 구간 키 => 정렬된 (역, 역)
EdgeKey = Tuple[str, str]


def edge_key(a: str, b: str) -> EdgeKey:
    return (a, b) if a <= b else (b, a)


def is_shinkansen(line: str) -> bool:
    lowered = line.lower()
    return any(marker in lowered for marker in SHINKANSEN_MARKERS)


def is_limited_express(line: str) -> bool:
    lowered = line.lower()
    return any(marker in lowered for marker in LIMITED_EXPRESS_MARKERS)


def is_walk_line(line: Optional[str]) -> bool:
    return bool(line) and line.lower() in WALK_LINES


def is_line_allowed(
    line: str, allow_shinkansen: bool = True, allow_limited_express: bool = True
) -> bool:
    if not allow_shinkansen and is_shinkansen(line):
        return False
    if not allow_limited_express and is_limited_express(line):
        return False
    return True


class PathFinder:
    """
    가중치(소요시간) 무방향 그래프 위의 다익스트라

    호출마다 frontier, best, parent 를 새로 만들기 때문에
    같은 그래프를 여러 스레드에서 동시에 사용 가능
    """

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def shortest_path(
        self,
        from_id: str,
        to_id: str,
        excluded_edges: Optional[AbstractSet[EdgeKey]] = None,
        allow_shinkansen: bool = True,
        allow_limited_express: bool = True,
    ) -> Optional[Path]:
        """
        최단 시간 경로

        Args:
            from_id: 출발역 ID
            to_id: 도착역 ID
            excluded_edges: 사용하지 않을 구간 (edge_key 로 정규화된 쌍)
            allow_shinkansen: False면 신칸센 노선 제외
            allow_limited_express: False면 특급/라이너 노선 제외

        Returns:
            Path 또는 None (역을 모르거나 연결되지 않은 경우)
        """
        if not self.graph.has_station(from_id) or not self.graph.has_station(to_id):
            return None

        # 호출자가 넘긴 쌍의 방향과 무관하게 비교
        excluded = (
            {edge_key(a, b) for a, b in excluded_edges} if excluded_edges else frozenset()
        )

        # (누적 소요시간, 삽입 순서, 역) => 같은 시간이면 먼저 넣은 것이 먼저
        counter = itertools.count()
        heap: List[Tuple[int, int, str]] = [(0, next(counter), from_id)]
        best: Dict[str, int] = {from_id: 0}
        # 역 -> (이전 역, 노선, 구간 소요시간)
        parent: Dict[str, Tuple[str, str, int]] = {}

        while heap:
            current_duration, _, current_id = heapq.heappop(heap)

            # 이미 더 짧은 경로로 방문했으면 skip
            if current_duration > best.get(current_id, current_duration):
                continue

            if current_id == to_id:
                return self._reconstruct(from_id, to_id, parent, current_duration)

            for edge in self.graph.neighbors(current_id):
                if excluded and edge_key(current_id, edge.neighbor) in excluded:
                    continue
                if not is_line_allowed(edge.line, allow_shinkansen, allow_limited_express):
                    continue

                new_duration = current_duration + edge.duration
                # 동일 시간이면 먼저 찾은 경로 유지
                if edge.neighbor not in best or new_duration < best[edge.neighbor]:
                    best[edge.neighbor] = new_duration
                    parent[edge.neighbor] = (current_id, edge.line, edge.duration)
                    heapq.heappush(heap, (new_duration, next(counter), edge.neighbor))

        return None

    @staticmethod
    def _reconstruct(
        from_id: str,
        to_id: str,
        parent: Dict[str, Tuple[str, str, int]],
        total_duration: int,
    ) -> Path:
        """leaf -> root 역추적"""
        steps: List[PathStep] = []
        node = to_id
        while node != from_id:
            prev_id, line, duration = parent[node]
            steps.append(PathStep(node, line, duration))
            node = prev_id
        steps.append(PathStep(from_id, "", 0))
        steps.reverse()
        return Path(steps=steps, total_duration=total_duration)
