# sampletrack/domains/teams/models.py

"""
'teams' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel, Column


# =============================================================================
# 1. teams 테이블 모델
# =============================================================================
class TeamBase(SQLModel):
    name: str = Field(primary_key=True, max_length=100, description="팀 이름 (시료/필드/라벨의 소유 키)")


class Team(TeamBase, table=True):
    __tablename__ = "teams"

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
