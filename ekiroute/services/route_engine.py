"""
UI 레이어가 호출하는 경로 탐색 엔진

그래프 1개를 감싸는 명시적 인스턴스 (전역 싱글톤 X)
=> 테스트에서는 작은 합성 그래프로 바로 생성 가능
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ekiroute.algorithms.path_finder import PathFinder
from ekiroute.algorithms.route_materializer import RouteMaterializer
from ekiroute.core.exceptions import RouteNotFoundException, StationNotFoundException
from ekiroute.db.network_graph import DatasetSource, NetworkGraph, load_network
from ekiroute.models.dataset import Station
from ekiroute.models.domain import RouteStop
from ekiroute.models.responses import RouteSummary
from ekiroute.services.line_service import LineService
from ekiroute.services.route_search_service import RouteSearchService
from ekiroute.services.route_summary import summarize_route
from ekiroute.services.station_search_service import StationSearchService

logger = logging.getLogger(__name__)


class RouteEngine:

    def __init__(self, graph: NetworkGraph):
        self.graph = graph
        self.path_finder = PathFinder(graph)
        self.materializer = RouteMaterializer(graph)
        self.station_search = StationSearchService(graph)
        self.lines = LineService(graph)
        self.route_search = RouteSearchService(graph, self.path_finder, self.materializer)

        if graph.is_empty:
            logger.warning("빈 네트워크로 RouteEngine 생성 => 모든 검색 결과가 비어 있음")
        logger.info("RouteEngine 초기화 완료")

    # 역 / 노선 조회

    def get_station(self, station_id: str) -> Optional[Station]:
        return self.graph.get_station(station_id)

    def require_station(self, station_id: str) -> Station:
        station = self.graph.get_station(station_id)
        if station is None:
            raise StationNotFoundException(f"역을 찾을 수 없습니다: {station_id}")
        return station

    def all_stations(self) -> List[Station]:
        return self.station_search.all_stations()

    def search_stations(
        self, query: str, user_location: Optional[Tuple[float, float]] = None
    ) -> List[Station]:
        return self.station_search.search_stations(query, user_location)

    def find_nearest_station(self, latitude: float, longitude: float) -> Optional[Station]:
        return self.station_search.find_nearest_station(latitude, longitude)

    def get_nearby_lines(self, latitude: float, longitude: float, limit: int) -> List[str]:
        return self.station_search.get_nearby_lines(latitude, longitude, limit)

    def all_lines(self) -> List[str]:
        return self.lines.all_lines()

    def search_lines(self, query: str) -> List[str]:
        return self.lines.search_lines(query)

    def line_reading(self, line_name: str) -> Optional[str]:
        return self.lines.line_reading(line_name)

    def stations_for_line(self, line_name: str) -> List[Station]:
        return self.lines.stations_for_line(line_name)

    # 경로 탐색

    def find_single_route(self, from_id: str, to_id: str) -> Optional[List[RouteStop]]:
        return self.route_search.find_single_route(from_id, to_id)

    def require_route(self, from_id: str, to_id: str) -> List[RouteStop]:
        route = self.route_search.find_single_route(from_id, to_id)
        if route is None:
            raise RouteNotFoundException(f"경로를 찾을 수 없습니다: {from_id} → {to_id}")
        return route

    def find_multiple_routes(
        self,
        from_id: str,
        to_id: str,
        max_routes: Optional[int] = None,
        allow_shinkansen: bool = True,
        allow_limited_express: bool = True,
    ) -> List[List[RouteStop]]:
        return self.route_search.find_multiple_routes(
            from_id,
            to_id,
            max_routes=max_routes,
            allow_shinkansen=allow_shinkansen,
            allow_limited_express=allow_limited_express,
        )

    def find_route_via(
        self,
        from_id: str,
        to_id: str,
        via_ids: Sequence[str],
        max_routes: Optional[int] = None,
        allow_shinkansen: bool = True,
        allow_limited_express: bool = True,
    ) -> List[List[RouteStop]]:
        return self.route_search.find_route_via(
            from_id,
            to_id,
            via_ids,
            max_routes=max_routes,
            allow_shinkansen=allow_shinkansen,
            allow_limited_express=allow_limited_express,
        )

    def route_duration(self, stops: Sequence[RouteStop]) -> int:
        return self.materializer.route_duration(stops)

    def alternative_lines(self, from_id: str, to_id: str) -> List[str]:
        return self.materializer.alternative_lines(from_id, to_id)

    def summarize_routes(self, routes: Sequence[Sequence[RouteStop]]) -> List[RouteSummary]:
        return [
            summarize_route(self.materializer, stops, rank)
            for rank, stops in enumerate(routes, start=1)
        ]


def build_route_engine(source: Optional[DatasetSource] = None) -> RouteEngine:
    """데이터셋을 읽어 엔진 생성 (source 가 없으면 settings.DATASET_PATH)"""
    return RouteEngine(load_network(source))
