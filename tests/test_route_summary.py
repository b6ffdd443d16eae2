"""
경로 요약 / 노선 변경 / 통과역 수 테스트
"""

import pytest

from ekiroute.algorithms.route_materializer import RouteMaterializer
from ekiroute.core.exceptions import InvalidLineSelectionException
from ekiroute.services.route_summary import (
    count_pass_stations_after,
    select_line,
    summarize_route,
)


@pytest.fixture
def materializer(mini_graph):
    return RouteMaterializer(mini_graph)


@pytest.fixture
def walk_route(materializer):
    return materializer.materialize(
        [("A", ""), ("B", "Local"), ("C", "Local"), ("H", "Local"), ("D", "walk")]
    )


class TestSummarizeRoute:
    def test_summary_fields(self, materializer, walk_route):
        summary = summarize_route(materializer, walk_route, rank=2)

        assert summary.rank == 2
        assert summary.station_ids == ["A", "B", "C", "H", "D"]
        assert summary.total_minutes == 16
        assert summary.stations_count == 5
        assert summary.transfers == 1
        assert summary.has_walk is True

    def test_preview_shows_key_stations(self, materializer, walk_route):
        """출발 → 환승 → 도착 역만"""
        summary = summarize_route(materializer, walk_route)

        assert summary.preview == "Aoba → Hamacho → Daimon"

    def test_no_walk(self, materializer):
        stops = materializer.materialize([("A", ""), ("E", "Metro"), ("F", "Metro"), ("D", "Metro")])

        summary = summarize_route(materializer, stops)

        assert summary.has_walk is False
        assert summary.transfers == 0
        assert summary.total_minutes == 14


class TestSelectLine:
    """대체 노선으로 변경"""

    def test_select_alternative(self, scenario_graph):
        materializer = RouteMaterializer(scenario_graph)
        stops = materializer.materialize([("S1", ""), ("S2", "A"), ("S3", "A"), ("S4", "A")])

        updated = select_line(stops, 1, "B")

        assert updated[1].line == "B"
        # 원본은 그대로
        assert stops[1].line == "A"

    def test_line_not_in_alternatives(self, walk_route):
        with pytest.raises(InvalidLineSelectionException) as exc_info:
            select_line(walk_route, 1, "Metro")

        assert exc_info.value.code == "INVALID_LINE_SELECTION"

    @pytest.mark.parametrize("index", [-1, 5, 99])
    def test_index_out_of_range(self, walk_route, index):
        with pytest.raises(InvalidLineSelectionException):
            select_line(walk_route, index, "Local")


class TestCountPassStations:
    def test_consecutive_pass_stations(self, walk_route):
        """A 다음 B, C 통과 후 H 환승"""
        assert count_pass_stations_after(walk_route, 0) == 2

    def test_no_pass_after_transfer(self, walk_route):
        assert count_pass_stations_after(walk_route, 3) == 0

    def test_last_index(self, walk_route):
        assert count_pass_stations_after(walk_route, 4) == 0
