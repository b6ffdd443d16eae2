from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# 데이터셋(JSON) 입력 구조 정의


class Station(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str = Field(..., description="역 ID (외부 키)")
    name: str = Field(..., description="역 이름")
    prefecture: str = Field(..., description="도도부현")
    latitude: float = Field(..., ge=-90, le=90, description="위도")
    longitude: float = Field(..., ge=-180, le=180, description="경도")
    # 참고용 정보일 뿐, 실제 연결은 Connection.line 기준
    lines: List[str] = Field(default_factory=list, description="경유 노선 목록")
    aliases: Optional[List[str]] = Field(None, description="별칭 목록")


class Connection(BaseModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, coerce_numbers_to_str=True
    )

    from_id: str = Field(..., validation_alias=AliasChoices("from", "from_id"))
    to_id: str = Field(..., validation_alias=AliasChoices("to", "to_id"))
    line: str
    duration: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("duration", "duration_minutes"),
        description="평균 소요시간 (분)",
    )


class Line(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    reading: str = Field(..., description="읽는 법 (노선 검색용)")


class RailwayDataset(BaseModel):
    stations: List[Station] = Field(default_factory=list)
    connections: List[Connection] = Field(default_factory=list)
    lines: Optional[List[Line]] = None
