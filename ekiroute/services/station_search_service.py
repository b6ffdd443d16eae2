import logging
from typing import List, Optional, Tuple

# NNS => KD-TREE 사용하기
from scipy.spatial import KDTree
import numpy as np

from ekiroute.algorithms.distance_calculator import DistanceCalculator
from ekiroute.core.config import settings
from ekiroute.db.network_graph import NetworkGraph
from ekiroute.models.dataset import Station

logger = logging.getLogger(__name__)


class StationSearchService:
    """역 이름/별칭/위치 기반 검색 (그래프 탐색과 무관)"""

    def __init__(self, graph: NetworkGraph, distance_calc: Optional[DistanceCalculator] = None):
        self.graph = graph
        self.distance_calc = distance_calc or DistanceCalculator()
        self.stations: List[Station] = graph.all_stations()

        self._lats = np.array([s.latitude for s in self.stations], dtype=float)
        self._lons = np.array([s.longitude for s in self.stations], dtype=float)

        # 빈 그래프에서는 KD-Tree 생성 불가
        self.kdtree: Optional[KDTree] = None
        if self.stations:
            self.kdtree = KDTree(np.column_stack([self._lats, self._lons]))

        logger.info(f"StationSearchService 초기화 완료: {len(self.stations)}개 역")

    def search_stations(
        self, query: str, user_location: Optional[Tuple[float, float]] = None
    ) -> List[Station]:
        """
        역 검색

        우선순위: 역명 완전일치 → 별칭 완전일치 → 역명 부분일치 → 별칭 부분일치
        부분일치는 현재 위치가 있으면 거리순, 없으면 이름이 짧은 순

        Args:
            query: 검색어 (대소문자 무시)
            user_location: (위도, 경도)

        Returns:
            최대 STATION_SEARCH_LIMIT 개
        """
        query = query.strip().lower()
        if not query:
            return []

        exact_match: List[Station] = []
        alias_exact_match: List[Station] = []
        partial_match: List[Station] = []
        alias_partial_match: List[Station] = []

        for station in self.stations:
            name_lower = station.name.lower()
            aliases = [alias.lower() for alias in station.aliases or []]

            if name_lower == query:
                exact_match.append(station)
            elif query in aliases:
                alias_exact_match.append(station)
            elif query in name_lower:
                partial_match.append(station)
            elif any(query in alias for alias in aliases):
                alias_partial_match.append(station)

        # sorted 는 stable => 같은 값이면 데이터셋 순서 유지
        if user_location is not None:
            lat, lon = user_location
            key = lambda s: self.distance_calc.calculate_distance(
                lat, lon, s.latitude, s.longitude
            )
        else:
            key = lambda s: len(s.name)

        partial_match.sort(key=key)
        alias_partial_match.sort(key=key)

        result = exact_match + alias_exact_match + partial_match + alias_partial_match
        return result[: settings.STATION_SEARCH_LIMIT]

    def get_nearby_lines(self, latitude: float, longitude: float, limit: int) -> List[str]:
        """가까운 역 순으로 노선 수집 (먼저 나온 역의 노선이 앞)"""
        if not self.stations or limit <= 0:
            return []

        distances = self.distance_calc.distances_from(
            latitude, longitude, self._lats, self._lons
        )
        nearest = np.argsort(distances, kind="stable")[: settings.NEARBY_STATION_SAMPLE]

        line_order: List[str] = []
        for idx in nearest:
            for line in self.stations[int(idx)].lines:
                if line not in line_order:
                    line_order.append(line)
                if len(line_order) >= limit:
                    return line_order
        return line_order

    def find_nearest_station(self, latitude: float, longitude: float) -> Optional[Station]:
        """KD-Tree 로 가장 가까운 역 (위경도 평면 기준)"""
        if self.kdtree is None or not self._is_valid_location(latitude, longitude):
            return None

        _, idx = self.kdtree.query([latitude, longitude])
        return self.stations[int(idx)]

    def all_stations(self) -> List[Station]:
        return list(self.stations)

    @staticmethod
    def _is_valid_location(lat: float, lon: float) -> bool:
        return -90 <= lat <= 90 and -180 <= lon <= 180
