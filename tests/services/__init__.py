# tests/services/__init__.py

"""
시료 테이블 코어(`sampletrack.services.sample_table`) 단위 테스트 패키지입니다.
"""
