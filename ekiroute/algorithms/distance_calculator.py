import math
from typing import Tuple

import numpy as np

from ekiroute.core.config import EARTH_RADIUS_KM


class DistanceCalculator:
    EARTH_RADIUS = EARTH_RADIUS_KM  # km

    def calculate_distance(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> float:
        """두 좌표 간 거리 계산(km)"""
        return self.haversine((lat1, lon1), (lat2, lon2))

    def haversine(
        self, coord1: Tuple[float, float], coord2: Tuple[float, float]
    ) -> float:
        """하버사인 공식으로 지구의 곡률 고려하여 두 좌표 간 거리 계산"""
        lat1, lon1 = coord1
        lat2, lon2 = coord2

        # radian convertion
        lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

        # haversine formula
        dlat = lat2 - lat1
        dlon = lon2 - lon1
        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        c = 2 * math.asin(math.sqrt(min(a, 1.0)))
        return self.EARTH_RADIUS * c

    def distances_from(
        self, lat: float, lon: float, lats: np.ndarray, lons: np.ndarray
    ) -> np.ndarray:
        """한 지점에서 여러 좌표까지의 거리 (벡터 연산, km)"""
        lat1 = math.radians(lat)
        lon1 = math.radians(lon)
        lat2 = np.radians(lats)
        lon2 = np.radians(lons)

        a = (
            np.sin((lat2 - lat1) / 2) ** 2
            + math.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
        )
        c = 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
        return self.EARTH_RADIUS * c
