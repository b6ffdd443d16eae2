# 복수 경로 탐색 서비스

import json
import logging
import time
from typing import List, Optional, Sequence, Set, Tuple

from ekiroute.algorithms.path_finder import (
    EdgeKey,
    PathFinder,
    edge_key,
    is_line_allowed,
    is_walk_line,
)
from ekiroute.algorithms.route_materializer import RouteMaterializer
from ekiroute.core.config import settings
from ekiroute.db.network_graph import NetworkGraph
from ekiroute.models.domain import CandidateRoute, Path, RouteStop, RouteStopStatus

logger = logging.getLogger(__name__)


class _CandidatePool:
    """후보 경로 수집 (역 ID 순서 기준 중복 제거 + 우회 경로 제한)"""

    def __init__(self, materializer: RouteMaterializer, max_allowed_duration: Optional[int] = None):
        self.materializer = materializer
        self.max_allowed_duration = max_allowed_duration
        self.candidates: List[CandidateRoute] = []
        self._used_paths: Set[Tuple[str, ...]] = set()

    def __len__(self) -> int:
        return len(self.candidates)

    def is_too_long(self, duration: int) -> bool:
        return self.max_allowed_duration is not None and duration > self.max_allowed_duration

    def add(self, pairs: Sequence[Tuple[str, str]], duration: int) -> bool:
        if self.is_too_long(duration):
            return False

        path_hash = tuple(station_id for station_id, _ in pairs)
        if path_hash in self._used_paths:
            return False
        self._used_paths.add(path_hash)

        stops = self.materializer.materialize(pairs)
        if not stops:
            return False

        transfers = sum(1 for stop in stops if stop.status is RouteStopStatus.TRANSFER)
        self.candidates.append(CandidateRoute(stops, duration, transfers))
        return True

    def ranked(self, max_routes: int) -> List[CandidateRoute]:
        penalty = settings.TRANSFER_PENALTY_MINUTES
        return sorted(self.candidates, key=lambda c: c.score(penalty))[:max_routes]


class RouteSearchService:
    """
    PathFinder 를 제약 조건을 바꿔가며 반복 호출하여
    서로 다른 경로 후보를 만들고 점수순으로 정렬

    점수 = 소요시간 + 환승 횟수 * TRANSFER_PENALTY_MINUTES (낮을수록 좋음)
    """

    def __init__(
        self,
        graph: NetworkGraph,
        path_finder: Optional[PathFinder] = None,
        materializer: Optional[RouteMaterializer] = None,
    ):
        self.graph = graph
        self.path_finder = path_finder or PathFinder(graph)
        self.materializer = materializer or RouteMaterializer(graph)

    def find_single_route(self, from_id: str, to_id: str) -> Optional[List[RouteStop]]:
        """제약 없는 최단 경로 1개"""
        result = self.path_finder.shortest_path(from_id, to_id)
        if result is None:
            return None
        return self.materializer.materialize(result)

    def find_multiple_routes(
        self,
        from_id: str,
        to_id: str,
        max_routes: Optional[int] = None,
        allow_shinkansen: bool = True,
        allow_limited_express: bool = True,
    ) -> List[List[RouteStop]]:
        """
        복수 경로 탐색 (최대 max_routes 개, 점수순)

        1. 최단 경로 => 기준 소요시간
        2. 출발역에서 나가는 방향별 탐색
        3. 도착역으로 들어오는 방향별 탐색
        4. 도보로 도착하는 경로 강제 탐색
        5. 기존 경로의 중간 구간을 제외하고 재탐색

        기준 소요시간 * DETOUR_FACTOR 를 넘는 후보는 버림
        후보는 max_routes * 3 개까지 생성
        """
        if max_routes is None:
            max_routes = settings.DEFAULT_MAX_ROUTES
        if max_routes <= 0:
            return []
        start_time = time.time()
        generation_limit = max_routes * 3

        search_kwargs = {
            "allow_shinkansen": allow_shinkansen,
            "allow_limited_express": allow_limited_express,
        }

        first_neighbors = self.graph.neighbors(from_id)
        last_neighbors = self.graph.neighbors(to_id)

        # 1. 최단 경로
        baseline = self.path_finder.shortest_path(from_id, to_id, **search_kwargs)
        max_allowed = None
        if baseline is not None:
            max_allowed = int(baseline.total_duration * settings.DETOUR_FACTOR)

        pool = _CandidatePool(self.materializer, max_allowed)
        if baseline is not None:
            pool.add(baseline.as_pairs(), baseline.total_duration)

        # 2. 출발역에서 나가는 각 방향
        for first_edge in first_neighbors:
            if len(pool) >= generation_limit:
                break
            if not is_line_allowed(first_edge.line, **search_kwargs):
                continue

            excluded = {
                edge_key(from_id, other.neighbor)
                for other in first_neighbors
                if other.neighbor != first_edge.neighbor
            }
            self._try_add(pool, from_id, to_id, excluded, search_kwargs)

        # 3. 도착역으로 들어오는 각 방향
        for last_edge in last_neighbors:
            if len(pool) >= generation_limit:
                break
            if not is_line_allowed(last_edge.line, **search_kwargs):
                continue

            excluded = {
                edge_key(other.neighbor, to_id)
                for other in last_neighbors
                if other.neighbor != last_edge.neighbor
            }
            self._try_add(pool, from_id, to_id, excluded, search_kwargs)

        # 4. 도보로 도착하는 경로 => 도착역으로 들어오는 구간을 모두 막고 도보 출발역까지 탐색
        for walk_edge in last_neighbors:
            if len(pool) >= generation_limit:
                break
            if not is_walk_line(walk_edge.line):
                continue

            excluded = {edge_key(edge.neighbor, to_id) for edge in last_neighbors}
            result = self.path_finder.shortest_path(
                from_id, walk_edge.neighbor, excluded, **search_kwargs
            )
            if result is None:
                continue

            pairs = result.as_pairs() + [(to_id, walk_edge.line)]
            pool.add(pairs, result.total_duration + walk_edge.duration)

        # 5. 기존 경로의 중간 구간 제외 후 재탐색 (앞의 3개)
        for i in range(min(len(pool), 3)):
            if len(pool) >= generation_limit:
                break

            existing = pool.candidates[i].stops
            if len(existing) > 4:
                mid = len(existing) // 2
                excluded = {edge_key(existing[mid].station_id, existing[mid + 1].station_id)}
                self._try_add(pool, from_id, to_id, excluded, search_kwargs)

        ranked = pool.ranked(max_routes)
        self._log_search_metrics(
            search_type="multiple",
            origin=from_id,
            destination=to_id,
            candidates=len(pool),
            routes_returned=len(ranked),
            response_time_ms=(time.time() - start_time) * 1000,
        )
        return [candidate.stops for candidate in ranked]

    def find_route_via(
        self,
        from_id: str,
        to_id: str,
        via_ids: Sequence[str],
        max_routes: Optional[int] = None,
        allow_shinkansen: bool = True,
        allow_limited_express: bool = True,
    ) -> List[List[RouteStop]]:
        """
        경유역을 거치는 경로 탐색

        (출발, 경유1), (경유1, 경유2), ..., (경유n, 도착) 구간을 이어 붙임
        구간 하나라도 실패하면 해당 시도 전체를 버림
        시도마다 직전 경로의 구간 하나를 돌아가며 제외하여 다양성 확보
        """
        if max_routes is None:
            max_routes = settings.DEFAULT_MAX_ROUTES
        if max_routes <= 0:
            return []
        start_time = time.time()

        all_points = [from_id, *via_ids, to_id]
        pool = _CandidatePool(self.materializer)

        for attempt in range(max_routes * 3):
            excluded: Set[EdgeKey] = set()

            # 직전 경로의 일부 구간 제외
            if attempt > 0 and pool.candidates:
                last_route = pool.candidates[-1].stops
                if len(last_route) > 4:
                    idx = (attempt % (len(last_route) - 2)) + 1
                    excluded.add(
                        edge_key(last_route[idx].station_id, last_route[idx + 1].station_id)
                    )

            chained = self._chain_segments(
                all_points, excluded, allow_shinkansen, allow_limited_express
            )
            if chained is None:
                logger.debug(f"경유 경로 시도 {attempt} 실패: {from_id} → {to_id}")
                continue

            pairs, total_duration = chained
            pool.add(pairs, total_duration)

            if len(pool) >= max_routes:
                break

        ranked = pool.ranked(max_routes)
        self._log_search_metrics(
            search_type="via",
            origin=from_id,
            destination=to_id,
            candidates=len(pool),
            routes_returned=len(ranked),
            response_time_ms=(time.time() - start_time) * 1000,
            via=list(via_ids),
        )
        return [candidate.stops for candidate in ranked]

    def _chain_segments(
        self,
        points: Sequence[str],
        excluded: Set[EdgeKey],
        allow_shinkansen: bool,
        allow_limited_express: bool,
    ) -> Optional[Tuple[List[Tuple[str, str]], int]]:
        full_path: List[Tuple[str, str]] = []
        total_duration = 0

        for i in range(len(points) - 1):
            segment = self.path_finder.shortest_path(
                points[i],
                points[i + 1],
                excluded,
                allow_shinkansen=allow_shinkansen,
                allow_limited_express=allow_limited_express,
            )
            if segment is None:
                return None

            total_duration += segment.total_duration
            segment_pairs = segment.as_pairs()
            # 구간 접합 역 중복 제거
            full_path.extend(segment_pairs if i == 0 else segment_pairs[1:])

        return full_path, total_duration

    def _try_add(
        self,
        pool: _CandidatePool,
        from_id: str,
        to_id: str,
        excluded: Set[EdgeKey],
        search_kwargs: dict,
    ) -> bool:
        result: Optional[Path] = self.path_finder.shortest_path(
            from_id, to_id, excluded, **search_kwargs
        )
        if result is None:
            return False
        return pool.add(result.as_pairs(), result.total_duration)

    def _log_search_metrics(
        self,
        search_type: str,
        origin: str,
        destination: str,
        candidates: int,
        routes_returned: int,
        response_time_ms: float,
        via: Optional[List[str]] = None,
    ) -> None:
        """탐색 메트릭 로깅 => 로그 수집기에서 분석"""
        if not settings.ENABLE_SEARCH_METRICS:
            return

        metrics = {
            "event": "route_search",
            "search_type": search_type,
            "origin": origin,
            "destination": destination,
            "candidates": candidates,
            "routes_returned": routes_returned,
            "response_time_ms": round(response_time_ms, 2),
        }
        if via:
            metrics["via"] = via

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")
