# sampletrack/services/sample_table/codec.py

"""
시료 레코드와 테이블 행(row) 사이의 변환을 담당하는 모듈입니다.

- unpack: 중첩된 시료 레코드 -> 평평한 표시용 행
- repack: 편집된 행 -> 시료 업데이트 페이로드

그리드는 편집된 동적 필드 값을 행의 최상위 키로 올려 놓습니다.
`repack_row`는 편집 전 행에 없던 필드 키를 다시 data 맵으로 옮깁니다.
편집된 필드를 직접 알 때는 `apply_cell_edit`으로 행을 만듭니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from . import dates
from .columns import RESERVED_NAMES, ColumnDescriptor, find_column, project_columns

DATE_ATTRIBUTES = ("expiration_date", "date_created", "date_modified")


class RowUpdateRejected(ValueError):
    """행 편집 결과로 유효한 업데이트 페이로드를 만들 수 없을 때 발생합니다."""


@dataclass
class UpdatePayload:
    team_name: Optional[str]
    data: Dict[str, Any] = field(default_factory=dict)
    expiration_date: Optional[dates.Timestamp] = None
    date_created: Optional[dates.Timestamp] = None
    date_modified: Optional[dates.Timestamp] = None

    def invalid_fields(self) -> List[str]:
        invalid = [name for name in DATE_ATTRIBUTES if dates.is_invalid(getattr(self, name))]
        invalid.extend(key for key, value in self.data.items() if dates.is_invalid(value))
        return invalid

    def to_json(self) -> Dict[str, Any]:
        """PUT /samples/{id} 요청 본문. 값이 없는 날짜와 팀 이름은 생략합니다."""
        invalid = self.invalid_fields()
        if invalid:
            raise RowUpdateRejected(f"Invalid date value for: {', '.join(invalid)}")

        body: Dict[str, Any] = {"data": dict(self.data)}
        if self.team_name:
            body["team_name"] = self.team_name
        for name in DATE_ATTRIBUTES:
            value = getattr(self, name)
            if value is not None:
                body[name] = dates.to_iso(value)
        return body


@dataclass
class RepackResult:
    sample_id: str
    payload: UpdatePayload
    row: Dict[str, Any]


@dataclass(frozen=True)
class CellEdit:
    field: str
    value: Any


def ensure_defaults(sample: Dict[str, Any], columns: Sequence[ColumnDescriptor]) -> Dict[str, Any]:
    for column in columns:
        column.ensure_default(sample)
    return sample


def unpack_row(sample: Dict[str, Any], columns: Sequence[ColumnDescriptor]) -> Dict[str, Any]:
    """
    시료의 누락된 날짜 필드를 채운 뒤(시료가 변경됨) 각 컬럼의 표시 값으로 행을 만듭니다.
    행에는 team_name과 data 맵의 복사본도 포함됩니다.
    """
    ensure_defaults(sample, columns)
    row = {column.field: column.display(sample) for column in columns}
    row["id"] = sample.get("id")
    row["team_name"] = sample.get("team_name")
    row["data"] = dict(sample.get("data") or {})
    return row


def _edited_date(
    new_row: Mapping[str, Any], old_row: Mapping[str, Any], name: str
) -> Optional[dates.Timestamp]:
    """편집된 고정 날짜만 반환합니다. 값이 비었거나 편집 전과 같으면 None."""
    value = new_row.get(name)
    if value is None or value == "" or value == old_row.get(name):
        return None
    return dates.parse_timestamp(value)


def repack_row(
    new_row: Mapping[str, Any],
    old_row: Mapping[str, Any],
    fields: Sequence[Mapping[str, Any]],
    team_name: Optional[str],
) -> RepackResult:
    """
    편집된 행에서 업데이트 페이로드를 만듭니다. 입력 행은 변경하지 않습니다.

    다시 data 맵으로 옮기는 값은 해당 컬럼의 write 변환을 거칩니다.
    편집되지 않은 고정 날짜는 페이로드에서 생략되어 서버 값이 유지됩니다.
    """
    sample_id = old_row.get("id")
    if sample_id is None:
        raise RowUpdateRejected("Edited row has no sample id")

    row = dict(new_row)
    row["data"] = dict(new_row.get("data") or {})
    dynamic_columns = project_columns([f for f in fields if f["name"] not in RESERVED_NAMES])
    for column in dynamic_columns:
        if column.field not in old_row and column.field in row:
            column.write(row.pop(column.field), row)
    row["id"] = sample_id

    payload = UpdatePayload(
        team_name=team_name,
        data=dict(row["data"]),
        expiration_date=_edited_date(row, old_row, "expiration_date"),
        date_created=_edited_date(row, old_row, "date_created"),
        date_modified=_edited_date(row, old_row, "date_modified"),
    )
    return RepackResult(sample_id=sample_id, payload=payload, row=row)


def apply_cell_edit(
    old_row: Mapping[str, Any],
    edit: CellEdit,
    columns: Sequence[ColumnDescriptor],
) -> Dict[str, Any]:
    """편집된 필드를 명시적으로 받아 해당 컬럼의 write 변환을 행의 복사본에 적용합니다."""
    column = find_column(columns, edit.field)
    if column is None:
        raise RowUpdateRejected(f"Unknown column '{edit.field}'")
    if not column.editable:
        raise RowUpdateRejected(f"Column '{edit.field}' is not editable")
    if column.is_date and dates.is_invalid(dates.parse_timestamp(edit.value)):
        raise RowUpdateRejected(f"Invalid date value for: {edit.field}")

    row = dict(old_row)
    row["data"] = dict(old_row.get("data") or {})
    column.write(edit.value, row)
    # 원본 시료 행에는 최상위 동적 키를 만들지 않습니다 (표시용 행만 갱신).
    if column.nested and column.field in old_row:
        row[column.field] = column.display(row)
    return row
