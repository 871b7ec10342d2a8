# sampletrack/domains/labels/__init__.py

"""
FastAPI 애플리케이션의 'labels' 도메인 패키지입니다.

팀별 라벨 양식(Label)을 관리합니다. 라벨 이미지 생성과 인쇄는 포함하지 않습니다.
"""

__title__ = "SampleTrack Labels Domain"
__description__ = "Manages team label templates."
__version__ = "0.1.0"
__all__ = []
