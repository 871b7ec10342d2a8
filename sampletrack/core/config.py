# sampletrack/core/config.py

from typing import List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # 모델에 없는 변수는 무시
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "SampleTrack API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Team sample tracking API"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Echo SQL statements")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy database URL (postgresql+asyncpg://...)")

    # --- ARQ (Redis) 작업 큐 설정 ---
    REDIS_HOST: str = Field("localhost", description="Redis host for the arq task queue")
    REDIS_PORT: int = Field(6379, description="Redis port for the arq task queue")

    # --- 시료 테이블 클라이언트 설정 ---
    API_BASE_URL: str = Field("http://localhost:8000/api/v1", description="Base URL used by the sample store client")
    API_TIMEOUT_SECONDS: float = Field(10.0, description="HTTP timeout for sample store requests")

    # --- CORS 설정 ---
    # 개발용으로 모든 출처를 허용합니다. 프로덕션에서는 프론트엔드 도메인으로 제한해야 합니다.
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")


settings = Settings()
