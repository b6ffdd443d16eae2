import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기 (.env)


class Settings:
    PROJECT_NAME: str = "EkiRoute"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # stations / connections / lines 를 담은 JSON 데이터셋
    DATASET_PATH: str = os.getenv("DATASET_PATH", "data/japan_stations.json")

    # 경로 탐색
    DEFAULT_MAX_ROUTES: int = int(os.getenv("DEFAULT_MAX_ROUTES", 5))
    TRANSFER_PENALTY_MINUTES: int = int(os.getenv("TRANSFER_PENALTY_MINUTES", 5))
    # 최단 경로 대비 허용하는 우회 배율
    DETOUR_FACTOR: float = float(os.getenv("DETOUR_FACTOR", 1.8))
    # 인접 리스트에 없는 구간(합성 도보 구간 등)의 추정 소요시간
    DEFAULT_HOP_MINUTES: int = int(os.getenv("DEFAULT_HOP_MINUTES", 3))

    # 역 검색
    STATION_SEARCH_LIMIT: int = int(os.getenv("STATION_SEARCH_LIMIT", 50))
    NEARBY_STATION_SAMPLE: int = int(os.getenv("NEARBY_STATION_SAMPLE", 30))

    SEARCH_MAX_WORKERS: int = int(os.getenv("SEARCH_MAX_WORKERS", 4))

    # 탐색 메트릭 로깅 활성화 플래그
    ENABLE_SEARCH_METRICS: bool = (
        os.getenv("ENABLE_SEARCH_METRICS", "true").lower() == "true"
    )


settings = Settings()  # 모듈화


# 도보 연결을 나타내는 가상 노선 (비교는 소문자 기준)
WALK_LINES = {"walk", "徒歩"}

# 노선명에 포함되면 신칸센으로 취급
SHINKANSEN_MARKERS = ("新幹線", "shinkansen")

# 노선명에 포함되면 특급/유료 열차로 취급
LIMITED_EXPRESS_MARKERS = (
    "特急",
    "エクスプレス",
    "ライナー",
    "limited express",
    "limited-express",
    "express",
    "liner",
)

EARTH_RADIUS_KM = 6371.0

ROUTE_STOP_DISPLAY_NAMES = {
    "departure": "出発",
    "arrival": "到着",
    "transfer": "乗換",
    "pass": "通過",
}
