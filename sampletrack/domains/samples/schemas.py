# sampletrack/domains/samples/schemas.py

"""
'samples' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

이 스키마들은 API 요청(Request) 및 응답(Response) 데이터의 유효성을 검사하고,
데이터를 직렬화(Serialization) 및 역직렬화(Deserialization)하는 데 사용됩니다.
"""

from typing import List, Optional, Dict, Any
from datetime import datetime
from pydantic import BaseModel, Field as PydanticField


# =============================================================================
# 1. 시료 (Sample) 스키마
# =============================================================================
class SampleCreate(BaseModel):
    team_name: str = PydanticField(max_length=100, description="소유 팀 이름")
    expiration_date: Optional[datetime] = PydanticField(default=None, description="시료 만료 일시")
    data: Dict[str, Any] = PydanticField(default_factory=dict, description="팀 정의 필드 값")


class SampleUpdate(BaseModel):
    """
    시료 테이블이 보내는 부분 업데이트 페이로드입니다.
    date_created와 date_modified는 시스템이 관리하므로 서버에서 무시/재설정됩니다.
    """
    expiration_date: Optional[datetime] = PydanticField(None, description="시료 만료 일시")
    date_created: Optional[datetime] = PydanticField(None, description="시료 생성 일시 (무시됨)")
    date_modified: Optional[datetime] = PydanticField(None, description="시료 수정 일시 (서버가 재설정)")
    team_name: Optional[str] = PydanticField(None, max_length=100, description="소유 팀 이름")
    data: Optional[Dict[str, Any]] = PydanticField(None, description="팀 정의 필드 값 (전체 교체)")


class SampleResponse(BaseModel):
    id: str = PydanticField(description="시료 고유 ID")
    team_name: str
    expiration_date: Optional[datetime] = None
    date_created: datetime
    date_modified: datetime
    data: Dict[str, Any] = PydanticField(default_factory=dict)

    class Config:
        from_attributes = True


# =============================================================================
# 2. 시료 이력 (SampleAudit) 스키마
# =============================================================================
class SampleAuditResponse(BaseModel):
    id: int
    sample_id: str
    audit_number: int
    action: str
    team_name: str
    expiration_date: Optional[datetime] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    data: Dict[str, Any] = PydanticField(default_factory=dict)
    recorded_at: datetime

    class Config:
        from_attributes = True


class SampleAuditListResponse(BaseModel):
    sample_id: str
    entries: List[SampleAuditResponse]
