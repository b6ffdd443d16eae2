"""
철도 네트워크 그래프 (로드 후 불변)

서버/앱 시작 시 한 번만 데이터셋을 읽어서 메모리에 유지
=> 이후 모든 검색은 읽기 전용이므로 락 없이 공유 가능
=> 싱글톤 대신 생성한 인스턴스를 각 서비스에 주입
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ekiroute.core.config import settings
from ekiroute.core.exceptions import DatasetLoadError
from ekiroute.models.dataset import Connection, Line, RailwayDataset, Station
from ekiroute.models.domain import Edge

logger = logging.getLogger(__name__)

DatasetSource = Union[str, Path, bytes, bytearray, Mapping[str, Any], RailwayDataset]


class NetworkGraph:
    """역, 노선 읽는 법, 무방향 가중치 인접 리스트"""

    def __init__(
        self,
        stations: Iterable[Station] = (),
        connections: Iterable[Connection] = (),
        lines: Iterable[Line] = (),
        load_error: Optional[str] = None,
    ):
        self.load_error = load_error

        self._stations: List[Station] = list(stations)
        # 중복 ID는 마지막 값이 덮어씀 (정합성 보장 X, 허용 동작)
        self._station_by_id: Dict[str, Station] = {s.id: s for s in self._stations}
        self._line_readings: Dict[str, str] = {line.name: line.reading for line in lines}

        adjacency: Dict[str, List[Edge]] = {}
        self.connection_count = 0
        self.skipped_connections = 0

        for conn in connections:
            if conn.from_id not in self._station_by_id or conn.to_id not in self._station_by_id:
                self.skipped_connections += 1
                logger.debug(
                    f"알 수 없는 역을 참조하는 연결 무시: {conn.from_id}-{conn.to_id} ({conn.line})"
                )
                continue

            # 무방향 => 양방향 모두 추가
            adjacency.setdefault(conn.from_id, []).append(
                Edge(conn.to_id, conn.line, conn.duration)
            )
            adjacency.setdefault(conn.to_id, []).append(
                Edge(conn.from_id, conn.line, conn.duration)
            )
            self.connection_count += 1

        self._adjacency: Dict[str, Tuple[Edge, ...]] = {
            station_id: tuple(edges) for station_id, edges in adjacency.items()
        }

    @classmethod
    def from_dataset(cls, dataset: RailwayDataset) -> "NetworkGraph":
        return cls(dataset.stations, dataset.connections, dataset.lines or ())

    @property
    def is_empty(self) -> bool:
        return not self._stations

    @property
    def station_count(self) -> int:
        return len(self._station_by_id)

    def has_station(self, station_id: str) -> bool:
        return station_id in self._station_by_id

    def get_station(self, station_id: str) -> Optional[Station]:
        return self._station_by_id.get(station_id)

    def all_stations(self) -> List[Station]:
        """데이터셋 순서 그대로"""
        return list(self._stations)

    def neighbors(self, station_id: str) -> Tuple[Edge, ...]:
        return self._adjacency.get(station_id, ())

    def line_reading(self, line_name: str) -> Optional[str]:
        return self._line_readings.get(line_name)

    @property
    def line_reading_count(self) -> int:
        return len(self._line_readings)


def read_dataset(source: Optional[DatasetSource] = None) -> RailwayDataset:
    """
    데이터셋 읽기 및 검증

    Args:
        source: 파일 경로, JSON bytes, 파싱된 dict 또는 RailwayDataset
                (None이면 settings.DATASET_PATH)

    Raises:
        DatasetLoadError: 파일 없음, JSON 오류, 스키마 검증 실패
    """
    if source is None:
        source = settings.DATASET_PATH

    if isinstance(source, RailwayDataset):
        return source

    if isinstance(source, Mapping):
        payload = source
    elif isinstance(source, (bytes, bytearray)):
        payload = _decode_json(bytes(source), "<bytes>")
    else:
        path = Path(source)
        if not path.exists():
            raise DatasetLoadError(f"Dataset file not found at: {path}")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise DatasetLoadError(f"Failed to read dataset {path}: {e}") from e
        payload = _decode_json(raw, str(path))

    try:
        return RailwayDataset.model_validate(payload)
    except ValidationError as e:
        raise DatasetLoadError(
            f"Invalid dataset format ({e.error_count()} errors): {e.errors()[0]['msg']}"
        ) from e


def _decode_json(raw: bytes, origin: str) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Invalid JSON format in {origin}: {e}") from e


def load_network(source: Optional[DatasetSource] = None) -> NetworkGraph:
    """
    네트워크 그래프 구축

    로드 실패 시 예외 대신 빈 그래프 반환 (경고 로그)
    => 빈 그래프에서의 모든 조회는 빈 결과
    """
    try:
        dataset = read_dataset(source)
    except DatasetLoadError as e:
        logger.warning(f"{e.message}. Using empty network.")
        return NetworkGraph(load_error=e.message)

    graph = NetworkGraph.from_dataset(dataset)

    if graph.skipped_connections:
        logger.warning(f"알 수 없는 역을 참조하는 연결 {graph.skipped_connections}개 무시")

    logger.info(
        f"✓ Loaded {graph.station_count} stations, {graph.connection_count} connections, "
        f"{graph.line_reading_count} line readings"
    )
    return graph
