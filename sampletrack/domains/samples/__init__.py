# sampletrack/domains/samples/__init__.py

"""
FastAPI 애플리케이션의 'samples' 도메인 패키지입니다.

시료(Sample) 레코드와 그 변경 이력(SampleAudit)을 관리합니다.

주요 서브모듈:
- `models.py`: 'samples', 'sample_audits' 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 시료 및 이력 요청/응답 Pydantic 모델.
- `crud.py`: 시료 비동기 CRUD 로직과 이력 기록.
- `routers.py`: 시료 API 엔드포인트 정의.
"""

__title__ = "SampleTrack Samples Domain"
__description__ = "Manages samples and their audit history."
__version__ = "0.1.0"
__all__ = []
