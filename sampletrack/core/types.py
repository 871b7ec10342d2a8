# sampletrack/core/types.py

"""
도메인 모델이 공유하는 컬럼 타입 정의입니다.
"""

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

# PostgreSQL에서는 JSONB, 그 밖의 DB(테스트용 SQLite)에서는 일반 JSON으로 매핑됩니다.
JSONType = JSON().with_variant(JSONB(), "postgresql")
