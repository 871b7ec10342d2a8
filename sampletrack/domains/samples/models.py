# sampletrack/domains/samples/models.py

"""
'samples' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

- Sample: 팀이 추적하는 시료 레코드. 고정 속성과 팀 정의 필드 값(data 맵)을 가집니다.
- SampleAudit: 시료의 생성/수정/삭제 이력 스냅샷.
"""

from typing import Optional, Dict, Any
from datetime import datetime, UTC
from uuid import uuid4

from sqlalchemy import UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel, Column

from sampletrack.core.types import JSONType


def new_sample_id() -> str:
    return uuid4().hex


# =============================================================================
# 1. samples 테이블 모델
# =============================================================================
class SampleBase(SQLModel):
    team_name: str = Field(foreign_key="teams.name", index=True, max_length=100, description="소유 팀 이름 (FK)")
    expiration_date: Optional[datetime] = Field(
        default=None,
        sa_column=Column(TIMESTAMP(timezone=True)),
        description="시료 만료 일시"
    )
    data: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONType, nullable=False),
        description="팀 정의 필드 이름 -> 값"
    )


class Sample(SampleBase, table=True):
    __tablename__ = "samples"

    id: str = Field(default_factory=new_sample_id, primary_key=True, max_length=32)
    date_created: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="시료 생성 일시 (시스템 관리)"
    )
    date_modified: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="시료 마지막 수정 일시 (시스템 관리)"
    )


# =============================================================================
# 2. sample_audits 테이블 모델
# =============================================================================
class SampleAudit(SQLModel, table=True):
    """
    시료 변경 이력. 시료가 삭제되어도 이력은 남아야 하므로 samples에 대한 FK를 두지 않습니다.
    """
    __tablename__ = "sample_audits"
    __table_args__ = (UniqueConstraint("sample_id", "audit_number", name="uq_sample_audits_sample_number"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    sample_id: str = Field(index=True, max_length=32)
    audit_number: int = Field(description="시료별 1부터 증가하는 이력 번호")
    action: str = Field(max_length=10, description="'create', 'update', 'delete'")
    team_name: str = Field(max_length=100)
    expiration_date: Optional[datetime] = Field(default=None, sa_column=Column(TIMESTAMP(timezone=True)))
    date_created: Optional[datetime] = Field(default=None, sa_column=Column(TIMESTAMP(timezone=True)))
    date_modified: Optional[datetime] = Field(default=None, sa_column=Column(TIMESTAMP(timezone=True)))
    data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSONType, nullable=False))
    recorded_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="이력 기록 일시"
    )
