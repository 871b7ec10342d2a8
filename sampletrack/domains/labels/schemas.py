# sampletrack/domains/labels/schemas.py

"""
'labels' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional, Dict, Any
from datetime import datetime
from pydantic import BaseModel, Field as PydanticField


class LabelBase(BaseModel):
    name: str = PydanticField(min_length=1, max_length=100, description="라벨 양식 이름")
    width: float = PydanticField(gt=0, description="라벨 너비 (mm)")
    height: float = PydanticField(gt=0, description="라벨 높이 (mm)")
    template: Dict[str, Any] = PydanticField(default_factory=dict, description="인쇄할 필드 배치 정보")
    is_active: bool = PydanticField(default=True, description="해당 크기의 활성 라벨 여부")


class LabelCreate(LabelBase):
    pass


class LabelResponse(LabelBase):
    id: int = PydanticField(description="라벨 고유 ID")
    team_name: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
