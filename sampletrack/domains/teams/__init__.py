# sampletrack/domains/teams/__init__.py

"""
FastAPI 애플리케이션의 'teams' 도메인 패키지입니다.

팀(Team)은 시료, 필드 정의, 라벨 양식의 소유 단위입니다.
팀 이름이 기본 키이며, 다른 도메인은 팀 이름을 외래 키로 참조합니다.

주요 서브모듈:
- `models.py`: 'teams' 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 팀 요청 및 응답 Pydantic 모델.
- `crud.py`: 팀 비동기 CRUD 로직.
- `routers.py`: 팀 API 엔드포인트 정의.
"""

__title__ = "SampleTrack Teams Domain"
__description__ = "Manages teams that own samples, fields and labels."
__version__ = "0.1.0"
__all__ = []
