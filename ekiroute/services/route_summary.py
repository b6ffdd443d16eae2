from dataclasses import replace
from typing import List, Sequence

from ekiroute.algorithms.path_finder import is_walk_line
from ekiroute.algorithms.route_materializer import RouteMaterializer
from ekiroute.core.exceptions import InvalidLineSelectionException
from ekiroute.models.domain import RouteStop, RouteStopStatus
from ekiroute.models.responses import RouteSummary

_KEY_STATUSES = (
    RouteStopStatus.DEPARTURE,
    RouteStopStatus.TRANSFER,
    RouteStopStatus.ARRIVAL,
)


def summarize_route(
    materializer: RouteMaterializer, stops: Sequence[RouteStop], rank: int = 1
) -> RouteSummary:
    """경로 선택 목록에 보여줄 요약 (소요시간, 역 수, 환승 횟수, 도보 여부)"""
    return RouteSummary(
        rank=rank,
        station_ids=[stop.station_id for stop in stops],
        lines=[stop.line for stop in stops],
        total_minutes=materializer.route_duration(stops),
        stations_count=len(stops),
        transfers=sum(1 for stop in stops if stop.status is RouteStopStatus.TRANSFER),
        has_walk=any(is_walk_line(stop.line) for stop in stops),
        preview=" → ".join(
            stop.station_name for stop in stops if stop.status in _KEY_STATUSES
        ),
    )


def select_line(stops: Sequence[RouteStop], index: int, line: str) -> List[RouteStop]:
    """
    index 번째 역의 노선을 대체 노선 중 하나로 바꾼 새 리스트 반환

    Raises:
        InvalidLineSelectionException: index 범위 밖 또는 대체 노선에 없는 노선
    """
    if not 0 <= index < len(stops):
        raise InvalidLineSelectionException(f"잘못된 역 위치입니다: {index}")

    stop = stops[index]
    if line not in stop.alternative_lines:
        raise InvalidLineSelectionException(
            f"{stop.station_name}에서 선택할 수 없는 노선입니다: {line}"
        )

    updated = list(stops)
    updated[index] = replace(stop, line=line)
    return updated


def count_pass_stations_after(stops: Sequence[RouteStop], index: int) -> int:
    """index 다음부터 연속된 통과역 수"""
    count = 0
    for stop in stops[index + 1 :]:
        if stop.status is not RouteStopStatus.PASS:
            break
        count += 1
    return count
