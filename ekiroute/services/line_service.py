import logging
from typing import List, Optional, Set

from ekiroute.algorithms.path_finder import is_walk_line
from ekiroute.db.network_graph import NetworkGraph
from ekiroute.models.dataset import Station

logger = logging.getLogger(__name__)


class LineService:
    """노선별 역 목록 및 노선 검색"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

        line_set: Set[str] = set()
        for station in graph.all_stations():
            for line in station.lines:
                if not is_walk_line(line):
                    line_set.add(line)
        self._all_lines: List[str] = sorted(line_set)

        logger.info(f"LineService 초기화 완료: {len(self._all_lines)}개 노선")

    def all_lines(self) -> List[str]:
        """전체 노선명 (도보 제외, 정렬)"""
        return list(self._all_lines)

    def line_reading(self, line_name: str) -> Optional[str]:
        return self.graph.line_reading(line_name)

    def search_lines(self, query: str) -> List[str]:
        """노선명 또는 읽는 법 부분일치 (대소문자 무시)"""
        query = query.strip().lower()
        if not query:
            return []

        results = []
        for line in self._all_lines:
            if query in line.lower():
                results.append(line)
                continue
            reading = self.graph.line_reading(line)
            if reading and query in reading.lower():
                results.append(line)
        return results

    def stations_for_line(self, line_name: str) -> List[Station]:
        """
        노선의 역 목록 (노선 순서 근사)

        종점(같은 노선 연결이 1개인 역)에서 DFS로 따라가며 방문 순서대로 나열
        분기 노선은 마지막에 push 된 분기부터 방문 => 물리적 순서 보장 X
        도달 못 한 역(순환선 등)은 원래 순서로 뒤에 추가
        """
        line_stations = [s for s in self.graph.all_stations() if line_name in s.lines]
        if not line_stations:
            return []

        member_ids = {s.id for s in line_stations}

        def same_line_neighbors(station_id: str) -> List[str]:
            return [
                edge.neighbor
                for edge in self.graph.neighbors(station_id)
                if edge.line == line_name and edge.neighbor in member_ids
            ]

        # 종점 찾기, 없으면 첫 역
        start = line_stations[0]
        for station in line_stations:
            if len(same_line_neighbors(station.id)) == 1:
                start = station
                break

        ordered: List[Station] = []
        visited: Set[str] = set()
        stack = [start]
        while stack:
            current = stack.pop()
            if current.id in visited:
                continue
            visited.add(current.id)
            ordered.append(current)

            for neighbor_id in same_line_neighbors(current.id):
                if neighbor_id not in visited:
                    neighbor = self.graph.get_station(neighbor_id)
                    if neighbor is not None:
                        stack.append(neighbor)

        for station in line_stations:
            if station.id not in visited:
                ordered.append(station)
                visited.add(station.id)

        return ordered
