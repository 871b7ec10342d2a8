# tests/__init__.py

"""
SampleTrack 애플리케이션의 테스트 스위트 패키지입니다.

테스트 코드는 `pytest`와 `pytest-asyncio`를 기반으로 작성됩니다.

- `conftest.py`: 테스트 데이터베이스, 테스트 클라이언트, 테스트 데이터 픽스처.
- `test_main.py`: 루트, 헬스 체크, ARQ 워커 설정.
- `domains/`: 도메인(teams, fields, samples, labels)별 API 통합 테스트.
- `services/`: 시료 테이블 코어 단위 테스트.
"""

__title__ = "SampleTrack API Tests"
__description__ = "Test suite for the SampleTrack FastAPI application."
__version__ = "0.1.0"
__all__ = []
