# sampletrack/services/sample_table/columns.py

"""
필드 정의로부터 시료 테이블의 컬럼 설명자(ColumnDescriptor)를 만드는 모듈입니다.

컬럼 순서는 항상 `id`, 팀의 동적 필드(정의 순서 유지), `date_created`,
`date_modified`, `expiration_date` 입니다.

동적 컬럼의 값은 시료 레코드의 `data` 맵에 저장됩니다. 날짜 필드 값이 없으면
표시 전에 `ensure_default()`가 현재 시각을 채워 넣습니다 (fill on read).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sampletrack.domains.fields.schemas import ValueKind, infer_value_kind

from . import dates

logger = logging.getLogger(__name__)

# 시료의 고정 속성 이름. 같은 이름의 필드 정의는 동적 컬럼으로 만들지 않습니다.
RESERVED_NAMES = frozenset({"id", "date_created", "date_modified", "expiration_date", "team_name", "data"})

MISSING_TEXT = "N/A"


@dataclass(frozen=True)
class ColumnDescriptor:
    field: str
    header_name: str
    value_kind: ValueKind = ValueKind.TEXT
    editable: bool = True
    width: Optional[int] = None
    flex: Optional[float] = None
    nested: bool = True  # True면 record["data"][field]에 저장

    @property
    def is_date(self) -> bool:
        return self.value_kind == ValueKind.DATE

    def display(self, record: Mapping[str, Any]) -> Any:
        """레코드를 변경하지 않고 표시 값을 계산합니다."""
        if self.nested:
            value = (record.get("data") or {}).get(self.field)
            if self.is_date:
                return dates.format_display(value)
            return MISSING_TEXT if value is None else value

        value = record.get(self.field)
        if self.is_date:
            # 고정 날짜 컬럼은 값이 없으면 빈 칸으로 표시
            return "" if value in (None, "") else dates.format_display(value)
        return value

    def ensure_default(self, record: Dict[str, Any]) -> bool:
        """
        날짜 필드 값이 data 맵에 없으면 현재 시각(ISO-8601)을 기록합니다.
        값을 채웠으면 True를 반환합니다.
        """
        if not (self.nested and self.is_date):
            return False
        data = record.get("data")
        if data is None:
            data = record["data"] = {}
        if self.field in data:
            return False
        data[self.field] = dates.to_iso(dates.now())
        return True

    def read(self, record: Dict[str, Any]) -> Any:
        self.ensure_default(record)
        return self.display(record)

    def write(self, value: Any, record: Optional[Dict[str, Any]] = None) -> Any:
        """
        편집된 값을 저장 형식으로 바꿔 레코드에 기록하고, 기록된 값을 반환합니다.
        날짜 값은 ISO-8601 문자열로 정규화하고, 해석할 수 없으면 InvalidDate를 기록합니다.
        record가 None이면 아무것도 하지 않고 None을 반환합니다 (미리보기 호출).
        """
        if record is None:
            return None

        if self.nested:
            target = record.get("data")
            if target is None:
                target = record["data"] = {}
        else:
            target = record

        if self.is_date:
            parsed = dates.parse_timestamp(value)
            # 잘못된 날짜는 InvalidDate 그대로 기록되어 페이로드 검증에서 거부됩니다.
            target[self.field] = parsed if dates.is_invalid(parsed) else dates.to_iso(parsed)
        else:
            target[self.field] = value
        return target[self.field]


ID_COLUMN = ColumnDescriptor(field="id", header_name="ID", editable=False, width=150, nested=False)
DATE_CREATED_COLUMN = ColumnDescriptor(
    field="date_created", header_name="Date Created", value_kind=ValueKind.DATE,
    editable=False, flex=0.6, nested=False,
)
DATE_MODIFIED_COLUMN = ColumnDescriptor(
    field="date_modified", header_name="Date Modified", value_kind=ValueKind.DATE,
    editable=False, flex=0.6, nested=False,
)
EXPIRATION_DATE_COLUMN = ColumnDescriptor(
    field="expiration_date", header_name="Expiration Date", value_kind=ValueKind.DATE,
    editable=True, flex=0.6, nested=False,
)

TRAILING_COLUMNS = (DATE_CREATED_COLUMN, DATE_MODIFIED_COLUMN, EXPIRATION_DATE_COLUMN)


def field_value_kind(field_def: Mapping[str, Any]) -> ValueKind:
    """명시된 value_kind를 우선하고, 없으면 이름 규칙으로 추론합니다."""
    value_kind = field_def.get("value_kind")
    if value_kind:
        return ValueKind(value_kind)
    return infer_value_kind(field_def["name"])


def project_columns(fields: Sequence[Mapping[str, Any]]) -> List[ColumnDescriptor]:
    """필드 정의 하나당 동적 컬럼 하나를, 정의 순서대로 만듭니다."""
    columns = []
    for field_def in fields:
        name = field_def["name"]
        if name in RESERVED_NAMES:
            logger.warning("Field '%s' conflicts with a fixed sample attribute and is not shown as a column", name)
            continue
        columns.append(
            ColumnDescriptor(
                field=name,
                header_name=field_def.get("display_name") or name,
                value_kind=field_value_kind(field_def),
                editable=True,
                flex=1.0,
            )
        )
    return columns


def build_columns(fields: Sequence[Mapping[str, Any]]) -> List[ColumnDescriptor]:
    return [ID_COLUMN, *project_columns(fields), *TRAILING_COLUMNS]


def find_column(columns: Sequence[ColumnDescriptor], field: str) -> Optional[ColumnDescriptor]:
    for column in columns:
        if column.field == field:
            return column
    return None


def is_cell_editable(columns: Sequence[ColumnDescriptor], field: str) -> bool:
    column = find_column(columns, field)
    return column is not None and column.editable
