# sampletrack/domains/fields/__init__.py

"""
FastAPI 애플리케이션의 'fields' 도메인 패키지입니다.

팀별 사용자 정의 필드(Field)는 시료 테이블의 동적 컬럼이 됩니다.
필드 이름은 시료 data 맵의 키와 같으므로, 이름 변경과 삭제는
팀 시료들의 data 맵에도 반영되어야 합니다 (`tasks.py`).

주요 서브모듈:
- `models.py`: 'fields' 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 필드 정의 요청/응답 모델과 값 종류(ValueKind).
- `crud.py`: 필드 정의 CRUD 및 data 키 동기화 작업 요청.
- `routers.py`: 필드 정의 API 엔드포인트 정의.
- `tasks.py`: data 키 이름 변경/제거 ARQ 작업.
"""

__title__ = "SampleTrack Fields Domain"
__description__ = "Manages team-defined sample fields."
__version__ = "0.1.0"
__all__ = []
