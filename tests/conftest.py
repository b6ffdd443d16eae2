"""
Pytest 설정 및 공통 Fixture

모든 fixture 는 작은 합성 네트워크 (dict 데이터셋) 로 구성
"""

import pytest

from ekiroute.db.network_graph import load_network
from ekiroute.services.route_engine import RouteEngine


def _station(station_id, name, lat, lon, lines, aliases=None, prefecture="東京都"):
    station = {
        "id": station_id,
        "name": name,
        "prefecture": prefecture,
        "latitude": lat,
        "longitude": lon,
        "lines": lines,
    }
    if aliases is not None:
        station["aliases"] = aliases
    return station


def _conn(a, b, line, duration):
    return {"from": a, "to": b, "line": line, "duration": duration}


@pytest.fixture
def scenario_dataset():
    """S1-S2-S3-S4, S2-S3 구간만 A/B 두 노선"""
    return {
        "stations": [
            _station("S1", "Station 1", 35.00, 139.00, ["A"]),
            _station("S2", "Station 2", 35.01, 139.01, ["A", "B"]),
            _station("S3", "Station 3", 35.02, 139.02, ["A", "B"]),
            _station("S4", "Station 4", 35.03, 139.03, ["A"]),
        ],
        "connections": [
            _conn("S1", "S2", "A", 5),
            _conn("S2", "S3", "A", 5),
            _conn("S2", "S3", "B", 7),
            _conn("S3", "S4", "A", 4),
        ],
    }


@pytest.fixture
def scenario_graph(scenario_dataset):
    return load_network(scenario_dataset)


@pytest.fixture
def mini_network_dataset():
    """
    A ─Local─ B ─Local─ C ─Local─ D
    A ─Metro─ E ─Metro─ F ─Metro─ D
    B ─Cross─ F,  C ─Local─ H ─walk─ D,  A ═Tokaido Shinkansen═ D
    """
    return {
        "stations": [
            _station("A", "Aoba", 35.00, 139.00, ["Local", "Metro", "Tokaido Shinkansen"]),
            _station("B", "Bunkyo", 35.01, 139.01, ["Local", "Cross"]),
            _station("C", "Chuo", 35.02, 139.02, ["Local"]),
            _station("D", "Daimon", 35.03, 139.03, ["Local", "Metro", "Tokaido Shinkansen"]),
            _station("E", "Ebisu", 34.99, 139.01, ["Metro"]),
            _station("F", "Fuchu", 35.00, 139.02, ["Metro", "Cross"]),
            _station("H", "Hamacho", 35.03, 139.02, ["Local"]),
        ],
        "connections": [
            _conn("A", "B", "Local", 5),
            _conn("B", "C", "Local", 5),
            _conn("C", "D", "Local", 5),
            _conn("A", "E", "Metro", 4),
            _conn("E", "F", "Metro", 4),
            _conn("F", "D", "Metro", 6),
            _conn("B", "F", "Cross", 3),
            _conn("C", "H", "Local", 2),
            _conn("H", "D", "walk", 4),
            _conn("A", "D", "Tokaido Shinkansen", 8),
        ],
    }


@pytest.fixture
def mini_graph(mini_network_dataset):
    return load_network(mini_network_dataset)


@pytest.fixture
def ladder_dataset():
    """P0..P5 Main 2분 간격, P3 ─Branch─ Q ─Branch─ P4 우회"""
    stations = [
        _station(f"P{i}", f"Point {i}", 35.0 + i * 0.01, 139.0, ["Main"]) for i in range(6)
    ]
    stations.append(_station("Q", "Quay", 35.035, 139.01, ["Branch"]))
    connections = [_conn(f"P{i}", f"P{i + 1}", "Main", 2) for i in range(5)]
    connections += [_conn("P3", "Q", "Branch", 3), _conn("Q", "P4", "Branch", 3)]
    return {"stations": stations, "connections": connections}


@pytest.fixture
def ladder_graph(ladder_dataset):
    return load_network(ladder_dataset)


@pytest.fixture
def tokyo_dataset():
    """역 검색용 (이름/별칭/위치)"""
    return {
        "stations": [
            _station("T1", "Tokyo", 35.681, 139.767, ["Yamanote", "Chuo"]),
            _station("T2", "Yaesu", 35.680, 139.770, ["Yamanote"], aliases=["Tokyo"]),
            _station("T3", "Tokyo Bay", 35.620, 139.780, ["Keiyo"]),
            _station("T4", "Shin-Tokyo Plaza", 35.700, 139.700, ["Marunouchi"]),
            _station("T5", "Kanda", 35.692, 139.771, ["Yamanote", "Chuo", "Ginza"], aliases=["Tokyo North"]),
            _station("T6", "Osaka", 34.702, 135.496, ["Osaka Loop"], prefecture="大阪府"),
        ],
        "connections": [
            _conn("T1", "T5", "Yamanote", 2),
            _conn("T1", "T2", "walk", 3),
        ],
    }


@pytest.fixture
def tokyo_graph(tokyo_dataset):
    return load_network(tokyo_dataset)


@pytest.fixture
def line_dataset():
    """순서가 섞인 직선 노선 Main + 순환선 Ring"""
    return {
        "stations": [
            _station("M9", "Main Depot", 35.10, 139.10, ["Main"]),
            _station("M2", "Main 2", 35.02, 139.00, ["Main"]),
            _station("M3", "Main 3", 35.03, 139.00, ["Main"]),
            _station("M1", "Main 1", 35.01, 139.00, ["Main", "walk"]),
            _station("R1", "Ring 1", 35.00, 139.05, ["Ring"]),
            _station("R2", "Ring 2", 35.01, 139.06, ["Ring"]),
            _station("R3", "Ring 3", 35.00, 139.07, ["Ring"]),
        ],
        "connections": [
            _conn("M1", "M2", "Main", 2),
            _conn("M2", "M3", "Main", 2),
            _conn("R1", "R2", "Ring", 3),
            _conn("R2", "R3", "Ring", 3),
            _conn("R3", "R1", "Ring", 3),
            _conn("M1", "R1", "walk", 5),
        ],
        "lines": [
            {"name": "Main", "reading": "めいんせん"},
            {"name": "Ring", "reading": "りんぐせん"},
        ],
    }


@pytest.fixture
def line_graph(line_dataset):
    return load_network(line_dataset)


@pytest.fixture
def mini_engine(mini_graph):
    return RouteEngine(mini_graph)


@pytest.fixture
def scenario_engine(scenario_graph):
    return RouteEngine(scenario_graph)
