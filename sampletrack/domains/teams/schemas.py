# sampletrack/domains/teams/schemas.py

"""
'teams' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from datetime import datetime
from pydantic import BaseModel, Field as PydanticField


class TeamBase(BaseModel):
    name: str = PydanticField(min_length=1, max_length=100, description="팀 이름")


class TeamCreate(TeamBase):
    pass


class TeamResponse(TeamBase):
    created_at: datetime = PydanticField(description="레코드 생성 일시")

    class Config:
        from_attributes = True
