# sampletrack/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 (get_db_session).
- ARQ 작업 큐 커넥션 풀 (get_task_queue).
"""

from typing import Any, AsyncGenerator, Optional

from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession

# 실제 데이터베이스 세션 제너레이터 임포트
from sampletrack.core.database import get_session as get_main_app_session


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    sampletrack.core.database.get_session을 래핑한 비동기 세션 제너레이터입니다.
    테스트에서는 이 의존성을 오버라이드하여 트랜잭션 세션을 주입합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_task_queue(request: Request) -> Optional[Any]:
    """
    lifespan에서 생성된 ARQ Redis 커넥션 풀을 반환합니다.
    작업 큐가 연결되지 않은 경우(테스트, 단독 실행) None을 반환합니다.
    """
    return getattr(request.app.state, "redis", None)
