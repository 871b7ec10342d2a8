# sampletrack/domains/labels/models.py

"""
'labels' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

팀은 여러 크기의 라벨 양식을 가질 수 있으며, 크기별로 하나의 라벨만 활성 상태가 됩니다.
라벨 이미지 생성과 인쇄는 외부 라벨 서브시스템이 담당합니다.
"""

from typing import Optional, Dict, Any
from datetime import datetime, UTC

from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel, Column

from sampletrack.core.types import JSONType


# =============================================================================
# 1. labels 테이블 모델
# =============================================================================
class LabelBase(SQLModel):
    name: str = Field(max_length=100, description="라벨 양식 이름")
    width: float = Field(gt=0, description="라벨 너비 (mm)")
    height: float = Field(gt=0, description="라벨 높이 (mm)")
    template: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONType, nullable=False),
        description="인쇄할 필드 배치 정보"
    )
    is_active: bool = Field(default=True, description="해당 크기의 활성 라벨 여부")


class Label(LabelBase, table=True):
    __tablename__ = "labels"

    id: Optional[int] = Field(default=None, primary_key=True)
    team_name: str = Field(foreign_key="teams.name", index=True, max_length=100, description="소유 팀 이름 (FK)")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )
