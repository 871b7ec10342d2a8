# sampletrack/services/__init__.py

"""
여러 도메인에 걸친 애플리케이션 서비스 패키지입니다.

- `sample_table`: 시료 테이블(데이터 그리드) 구성 계층.
"""

__all__ = []
