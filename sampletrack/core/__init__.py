# sampletrack/core/__init__.py

"""
애플리케이션 전반에서 사용하는 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 세션 팩토리, 테이블 생성.
- `crud_base.py`: 모든 도메인이 공유하는 비동기 CRUD 기반 클래스.
- `dependencies.py`: FastAPI 의존성 주입 함수 (DB 세션, 작업 큐).
- `tasks.py`: 도메인에 속하지 않는 ARQ 태스크 (DB 헬스 체크).
"""

__title__ = "SampleTrack Core"
__version__ = "0.1.0"
__all__ = []
