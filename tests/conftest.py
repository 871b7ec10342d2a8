# tests/conftest.py

import os
import asyncio
from typing import AsyncGenerator, Callable, Awaitable, Any, Dict, Generator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# --- 테스트용 데이터베이스 설정 ---
# 실제 운영 DB와 분리된 테스트 전용 DB URL을 사용합니다.
# 설정 모듈이 임포트되기 전에 DATABASE_URL을 지정해야 합니다.
TEST_DB_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "test_sampletrack.db")
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", f"sqlite+aiosqlite:///{TEST_DB_PATH}")
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("APP_ENV", "testing")

# sampletrack.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from sampletrack.main import app as main_app  # noqa: E402
from sampletrack.core import dependencies as deps  # noqa: E402
from sampletrack.core.database import get_session  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면 모든 모델 클래스가 임포트되어야 합니다.
from sampletrack.domains.models import *  # noqa: F401, F403, E402
from sampletrack.domains.teams import models as teams_models  # noqa: E402
from sampletrack.domains.fields import models as fields_models  # noqa: E402
from sampletrack.domains.samples import models as samples_models  # noqa: E402

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,             # 테스트 시 SQL 쿼리 출력하지 않음
    future=True,
    poolclass=NullPool,     # 각 연결이 독립적으로 사용되고 바로 닫히도록 함 (테스트마다 이벤트 루프가 다름)
)

# 테스트용 세션 팩토리 생성 (AsyncSession)
TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# --- 데이터베이스 픽스처 ---
async def _recreate_tables(drop_only: bool = False) -> None:
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        if not drop_only:
            await conn.run_sync(SQLModel.metadata.create_all)


@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """
    테스트 세션 시작 시 모든 테이블을 삭제하고 재생성합니다.
    테스트 종료 시 다시 테이블을 삭제합니다.
    """
    asyncio.run(_recreate_tables())
    yield  # 테스트 실행
    asyncio.run(_recreate_tables(drop_only=True))


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    각 테스트 함수마다 트랜잭션을 시작하고, 테스트 완료 후 롤백하여
    테스트 간의 격리를 보장하는 비동기 데이터베이스 세션을 제공합니다.
    세션의 commit()은 바깥 트랜잭션을 커밋하지 않습니다.
    """
    connection = await test_engine.connect()
    transaction = await connection.begin()
    session = TestingSessionLocal(bind=connection)

    try:
        yield session
    finally:
        await session.close()
        await transaction.rollback()
        await connection.close()


# --- 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    DB 세션 의존성을 테스트 세션으로 오버라이드한 AsyncClient를 반환합니다.
    lifespan은 실행되지 않으므로 ARQ 작업 큐는 연결되지 않습니다.
    """
    async def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        main_app.dependency_overrides.update({
            get_session: override_get_session,
            deps.get_db_session: override_get_session,
        })
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


class RecordingTaskQueue:
    """enqueue_job 호출을 기록하는 ARQ 커넥션 풀 대역."""

    def __init__(self):
        self.jobs = []

    async def enqueue_job(self, function: str, *args: Any, **kwargs: Any):
        self.jobs.append((function, args))
        return None


@pytest.fixture
def task_queue() -> Generator[RecordingTaskQueue, None, None]:
    """get_task_queue 의존성을 기록용 작업 큐로 오버라이드합니다."""
    queue = RecordingTaskQueue()
    main_app.dependency_overrides[deps.get_task_queue] = lambda: queue
    yield queue
    main_app.dependency_overrides.pop(deps.get_task_queue, None)


# --- 데이터 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_team(db_session: AsyncSession) -> teams_models.Team:
    """테스트용 팀을 데이터베이스에 생성하고 반환합니다."""
    team = teams_models.Team(name="qa-lab")
    db_session.add(team)
    await db_session.commit()
    await db_session.refresh(team)
    return team


@pytest_asyncio.fixture(scope="function")
async def test_other_team(db_session: AsyncSession) -> teams_models.Team:
    team = teams_models.Team(name="micro-lab")
    db_session.add(team)
    await db_session.commit()
    await db_session.refresh(team)
    return team


@pytest.fixture(scope="function")
def field_factory(db_session: AsyncSession) -> Callable[..., Awaitable[fields_models.Field]]:
    """팀 필드 정의를 생성하는 팩토리 함수를 반환합니다."""
    async def _create_field(team_name: str, name: str, display_name: str, sort_order: int = 0, **kwargs) -> fields_models.Field:
        field = fields_models.Field(
            team_name=team_name,
            name=name,
            display_name=display_name,
            sort_order=sort_order,
            **kwargs,
        )
        db_session.add(field)
        await db_session.commit()
        await db_session.refresh(field)
        return field
    return _create_field


@pytest_asyncio.fixture(scope="function")
async def test_fields(field_factory: Callable, test_team: teams_models.Team):
    """'batch'(텍스트)와 'received_date'(날짜) 필드를 생성합니다."""
    batch = await field_factory(test_team.name, "batch", "Batch", sort_order=1, value_kind="text")
    received = await field_factory(test_team.name, "received_date", "Received", sort_order=2, value_kind="date")
    return [batch, received]


@pytest.fixture(scope="function")
def sample_factory(db_session: AsyncSession) -> Callable[..., Awaitable[samples_models.Sample]]:
    async def _create_sample(team_name: str, data: Dict[str, Any], **kwargs) -> samples_models.Sample:
        sample = samples_models.Sample(team_name=team_name, data=data, **kwargs)
        db_session.add(sample)
        await db_session.commit()
        await db_session.refresh(sample)
        return sample
    return _create_sample


@pytest_asyncio.fixture(scope="function")
async def test_sample(sample_factory: Callable, test_team: teams_models.Team, test_fields) -> samples_models.Sample:
    """필드 값이 들어 있는 테스트용 시료를 생성합니다."""
    return await sample_factory(
        test_team.name,
        {"batch": "B7", "received_date": "2024-03-01T09:30:00+00:00"},
    )
