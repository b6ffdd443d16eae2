"""
도메인 모델 테스트
"""

import pytest

from ekiroute.core.config import settings
from ekiroute.models.domain import CandidateRoute, RouteStop, RouteStopStatus, VisitStatus


class TestVisitStatus:
    def test_strength_order(self):
        assert (
            VisitStatus.HOME.strength
            > VisitStatus.VISITED.strength
            > VisitStatus.TRANSFERRED.strength
            > VisitStatus.PASSED.strength
        )

    @pytest.mark.parametrize(
        "current, new, expected",
        [
            (VisitStatus.PASSED, VisitStatus.VISITED, VisitStatus.VISITED),
            (VisitStatus.HOME, VisitStatus.PASSED, VisitStatus.HOME),
            (VisitStatus.TRANSFERRED, VisitStatus.TRANSFERRED, VisitStatus.TRANSFERRED),
        ],
    )
    def test_stronger(self, current, new, expected):
        """기존 기록보다 약한 상태로는 덮어쓰지 않음"""
        assert current.stronger(new) is expected


class TestRouteStopStatus:
    @pytest.mark.parametrize(
        "status, label",
        [
            (RouteStopStatus.DEPARTURE, "出発"),
            (RouteStopStatus.ARRIVAL, "到着"),
            (RouteStopStatus.TRANSFER, "乗換"),
            (RouteStopStatus.PASS, "通過"),
        ],
    )
    def test_display_name(self, status, label):
        assert status.display_name == label

    def test_value_is_str(self):
        assert RouteStopStatus("transfer") is RouteStopStatus.TRANSFER


class TestCandidateRoute:
    def test_score_includes_transfer_penalty(self):
        stop = RouteStop("A", "Aoba", "東京都", 35.0, 139.0, RouteStopStatus.DEPARTURE)
        candidate = CandidateRoute([stop], total_duration=14, transfer_count=2)

        assert candidate.score(settings.TRANSFER_PENALTY_MINUTES) == 24
        assert candidate.station_ids == ["A"]
