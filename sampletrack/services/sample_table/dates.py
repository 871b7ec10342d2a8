# sampletrack/services/sample_table/dates.py

"""
시료 테이블에서 사용하는 타임스탬프 변환 함수 모음입니다.

- 저장 형식: ISO-8601 문자열 (시간대 포함, 시간대가 없으면 UTC로 간주)
- 표시 형식: MM/DD/YYYY

잘못된 문자열은 예외 대신 `InvalidDate`로 변환됩니다.
`InvalidDate`는 자기 자신을 포함한 어떤 값과도 같지 않으며 "Invalid DateTime"으로 표시됩니다.
"""

from datetime import date, datetime, UTC
from typing import Any, Optional, Union

DISPLAY_FORMAT = "%m/%d/%Y"
INVALID_DISPLAY = "Invalid DateTime"


class InvalidDateTime:
    """파싱에 실패한 타임스탬프를 나타내는 값."""
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    __hash__ = object.__hash__

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return INVALID_DISPLAY

    def __repr__(self) -> str:
        return "InvalidDate"


InvalidDate = InvalidDateTime()

Timestamp = Union[datetime, InvalidDateTime]


def now() -> datetime:
    return datetime.now(UTC)


def is_invalid(value: Any) -> bool:
    return isinstance(value, InvalidDateTime)


def parse_timestamp(value: Any) -> Timestamp:
    """
    datetime, date, ISO-8601 문자열, MM/DD/YYYY 문자열을 시간대가 있는 datetime으로 변환합니다.
    그 밖의 값(None 포함)이나 형식이 맞지 않는 문자열은 `InvalidDate`를 반환합니다.
    """
    if isinstance(value, InvalidDateTime):
        return value
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            try:
                parsed = datetime.strptime(text, DISPLAY_FORMAT)
            except ValueError:
                return InvalidDate
    else:
        return InvalidDate

    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def to_iso(value: Any) -> Optional[str]:
    """저장 형식(ISO-8601)으로 변환합니다. 잘못된 값은 None이 됩니다."""
    parsed = parse_timestamp(value)
    if is_invalid(parsed):
        return None
    return parsed.isoformat()


def format_display(value: Any) -> str:
    parsed = parse_timestamp(value)
    if is_invalid(parsed):
        return INVALID_DISPLAY
    return parsed.strftime(DISPLAY_FORMAT)
