# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.

- `test_teams_n.py`: 'teams' 도메인.
- `test_fields_n.py`: 'fields' 도메인과 시료 data 키 동기화.
- `test_samples_n.py`: 'samples' 도메인과 이력.
- `test_labels_n.py`: 'labels' 도메인.
"""

__title__ = "SampleTrack Domain Tests"
__version__ = "0.1.0"
__all__ = []
