# sampletrack/services/sample_table/__init__.py

"""
시료 테이블 코어 패키지입니다.

- `dates.py`: 타임스탬프 파싱/표시 변환과 `InvalidDate`.
- `columns.py`: 필드 정의 -> 컬럼 설명자.
- `codec.py`: 시료 레코드 <-> 테이블 행 변환, 업데이트 페이로드.
- `selection.py`: 선택된 시료 관리.
- `actions.py`: 일괄 삭제, 새로 고침, 이력 화면 경로.
- `client.py`: REST API 비동기 클라이언트 (httpx).
- `table.py`: 위 구성 요소를 묶는 `SampleTable`.
"""

from .codec import CellEdit, RowUpdateRejected, UpdatePayload
from .columns import ColumnDescriptor, build_columns
from .dates import InvalidDate
from .table import SampleTable

__all__ = [
    "CellEdit",
    "ColumnDescriptor",
    "InvalidDate",
    "RowUpdateRejected",
    "SampleTable",
    "UpdatePayload",
    "build_columns",
]
