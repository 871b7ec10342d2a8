# sampletrack/__init__.py

"""
SampleTrack FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 팀별 시료(Sample) 추적 관리 시스템의 백엔드와
시료 테이블(데이터 그리드) 구성 계층을 함께 포함합니다.

- `main.py`: FastAPI 애플리케이션 진입점 및 ARQ 워커 설정.
- `core`: 공통 설정, 데이터베이스 연결, 공통 CRUD 기반 클래스.
- `domains`: 팀(teams), 필드 정의(fields), 시료(samples), 라벨(labels) 도메인.
- `services.sample_table`: 필드 정의로부터 컬럼을 만들고, 시료 레코드와
  그리드 행(row) 사이를 변환하는 시료 테이블 코어.
"""

APP_NAME = "SampleTrack API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Team sample tracking API backend and sample table core."
__license__ = "MIT"
__all__ = []
