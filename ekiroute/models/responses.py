from typing import List, Optional
from pydantic import BaseModel, Field

# UI 레이어에 넘겨주는 응답 구조 정의


class RouteSummary(BaseModel):
    rank: int = Field(..., description="순위 (1부터)")
    station_ids: List[str] = Field(..., description="역 ID 순서")
    lines: List[Optional[str]] = Field(..., description="각 역에서의 노선")
    total_minutes: int = Field(..., description="총 소요시간 (분)")
    stations_count: int = Field(..., description="역 수 (출발/도착 포함)")
    transfers: int = Field(..., description="환승 횟수")
    has_walk: bool = Field(default=False, description="도보 구간 포함 여부")
    preview: str = Field(..., description="출발 → 환승 → 도착 역 이름")
