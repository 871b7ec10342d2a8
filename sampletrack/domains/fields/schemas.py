# sampletrack/domains/fields/schemas.py

"""
'fields' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

필드의 값 종류(value_kind)는 명시적 속성입니다. 요청에서 생략되면
이름에 'date'가 포함되었는지로 추론하는 기존 명명 규칙을 호환용으로만 적용합니다.
"""

from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator, model_validator


class ValueKind(str, Enum):
    DATE = "date"
    TEXT = "text"


def infer_value_kind(name: str) -> ValueKind:
    """기존 명명 규칙: 이름에 'date'가 들어간 필드는 날짜 값으로 취급합니다."""
    return ValueKind.DATE if "date" in name else ValueKind.TEXT


# =============================================================================
# 1. 필드 정의 (Field) 스키마
# =============================================================================
class FieldBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = PydanticField(min_length=1, max_length=100, description="필드 내부 이름 (data 맵 키)")
    display_name: str = PydanticField(min_length=1, max_length=100, description="필드 표시 명칭")
    value_kind: Optional[ValueKind] = PydanticField(default=None, description="'date' 또는 'text' (생략 시 이름으로 추론)")
    sort_order: int = PydanticField(default=0, description="팀 내 컬럼 정렬 순서")

    @model_validator(mode="after")
    def fill_value_kind(self):
        if self.value_kind is None:
            self.value_kind = infer_value_kind(self.name).value
        return self


class FieldCreate(FieldBase):
    team_name: str = PydanticField(max_length=100, description="소유 팀 이름")


class FieldUpdate(BaseModel):  # 업데이트는 모두 Optional
    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = PydanticField(None, min_length=1, max_length=100, description="필드 내부 이름")
    display_name: Optional[str] = PydanticField(None, min_length=1, max_length=100, description="필드 표시 명칭")
    value_kind: Optional[ValueKind] = PydanticField(None, description="'date' 또는 'text'")
    sort_order: Optional[int] = PydanticField(None, description="팀 내 컬럼 정렬 순서")

    @field_validator("name", "display_name", "value_kind", "sort_order")
    @classmethod
    def reject_explicit_null(cls, value):
        # 생략은 허용하지만 명시적 null은 NOT NULL 컬럼에 쓸 수 없습니다.
        if value is None:
            raise ValueError("must not be null")
        return value


class FieldResponse(BaseModel):
    id: int = PydanticField(description="필드 고유 ID")
    team_name: str
    name: str
    display_name: str
    value_kind: ValueKind
    sort_order: int
    created_at: datetime = PydanticField(description="레코드 생성 일시")
    updated_at: datetime = PydanticField(description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True
