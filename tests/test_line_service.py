"""
LineService 테스트
"""

import pytest

from ekiroute.services.line_service import LineService


@pytest.fixture
def line_service(line_graph):
    return LineService(line_graph)


class TestLineLookup:
    def test_all_lines_sorted_without_walk(self, line_service):
        assert line_service.all_lines() == ["Main", "Ring"]

    def test_search_by_name(self, line_service):
        assert line_service.search_lines("MA") == ["Main"]

    def test_search_by_reading(self, line_service):
        assert line_service.search_lines("りんぐ") == ["Ring"]

    def test_search_matches_both(self, line_service):
        """읽는 법 공통 부분 せん"""
        assert line_service.search_lines("せん") == ["Main", "Ring"]

    def test_empty_query(self, line_service):
        assert line_service.search_lines("") == []

    def test_line_reading(self, line_service):
        assert line_service.line_reading("Main") == "めいんせん"
        assert line_service.line_reading("Nope") is None


class TestStationsForLine:
    """종점부터 노선 순서대로"""

    def test_ordered_from_terminus(self, line_service):
        """데이터셋 순서와 무관하게 M3 - M2 - M1, 연결 없는 역은 뒤에"""
        stations = line_service.stations_for_line("Main")

        assert [s.id for s in stations] == ["M3", "M2", "M1", "M9"]

    def test_loop_line(self, line_service):
        """종점 없는 순환선은 첫 역부터 DFS"""
        stations = line_service.stations_for_line("Ring")

        assert [s.id for s in stations] == ["R1", "R3", "R2"]

    def test_unknown_line(self, line_service):
        assert line_service.stations_for_line("Nope") == []

    def test_every_member_listed_once(self, line_service):
        stations = line_service.stations_for_line("Main")

        assert len({s.id for s in stations}) == len(stations) == 4
