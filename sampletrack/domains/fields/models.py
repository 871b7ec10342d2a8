# sampletrack/domains/fields/models.py

"""
'fields' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

필드 정의(Field)는 팀별 사용자 정의 시료 속성을 기술합니다.
각 필드의 `name`은 시료의 `data` 맵 키로 사용됩니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlalchemy import UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field as SQLField, SQLModel, Column


# =============================================================================
# 1. fields 테이블 모델
# =============================================================================
class FieldBase(SQLModel):
    team_name: str = SQLField(foreign_key="teams.name", index=True, max_length=100, description="소유 팀 이름 (FK)")
    name: str = SQLField(max_length=100, description="필드 내부 이름 (data 맵 키)")
    display_name: str = SQLField(max_length=100, description="필드 표시 명칭 (컬럼 헤더)")
    value_kind: str = SQLField(default="text", max_length=10, description="'date' 또는 'text'")
    sort_order: int = SQLField(default=0, description="팀 내 컬럼 정렬 순서")


class Field(FieldBase, table=True):
    __tablename__ = "fields"
    __table_args__ = (UniqueConstraint("team_name", "name", name="uq_fields_team_name_name"),)

    id: Optional[int] = SQLField(default=None, primary_key=True)
    created_at: Optional[datetime] = SQLField(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = SQLField(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )
