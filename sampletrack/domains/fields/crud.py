# sampletrack/domains/fields/crud.py

"""
'fields' 도메인의 CRUD 로직을 담당하는 모듈입니다.

필드 이름 변경/삭제 시 팀 시료들의 data 맵 동기화가 필요하면
ARQ 작업 큐에 작업을 추가하고, 작업 큐가 없으면 같은 세션에서 즉시 반영합니다.
"""

import logging
from typing import Any, List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from sampletrack.core.crud_base import CRUDBase
from sampletrack.domains.samples import models as samples_models
from sampletrack.domains.teams.crud import team as team_crud

from . import models as fields_models
from . import schemas as fields_schemas
from . import tasks as fields_tasks

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 필드 정의 (Field) CRUD
# =============================================================================
class CRUDField(CRUDBase[fields_models.Field, fields_schemas.FieldCreate, fields_schemas.FieldUpdate]):
    default_order = ("team_name", "sort_order", "id")

    def __init__(self):
        super().__init__(model=fields_models.Field)

    async def get_by_team(self, db: AsyncSession, *, team_name: str) -> List[fields_models.Field]:
        """팀의 필드 정의를 컬럼 순서(sort_order, id)대로 조회합니다."""
        statement = (
            select(self.model)
            .where(self.model.team_name == team_name)
            .order_by(self.model.sort_order, self.model.id)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def get_by_team_and_name(
        self, db: AsyncSession, *, team_name: str, name: str
    ) -> Optional[fields_models.Field]:
        statement = select(self.model).where(self.model.team_name == team_name, self.model.name == name)
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def _has_samples_with_key(self, db: AsyncSession, team_name: str, key: str) -> bool:
        statement = select(samples_models.Sample.data).where(samples_models.Sample.team_name == team_name)
        result = await db.execute(statement)
        return any(key in (data or {}) for data in result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: fields_schemas.FieldCreate) -> fields_models.Field:
        """팀 존재 여부와 팀 내 이름 중복을 확인하고 생성합니다."""
        await team_crud.get_or_404(db, obj_in.team_name)
        if await self.get_by_team_and_name(db, team_name=obj_in.team_name, name=obj_in.name):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Field with this name already exists for the team.")
        return await super().create(db, obj_in=obj_in)

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: fields_models.Field,
        obj_in: fields_schemas.FieldUpdate,
        arq_redis_pool: Any = None,
    ) -> fields_models.Field:
        """
        이름 변경 시 팀 내 중복을 확인하고, 관련 시료가 있으면 data 키 이름 변경을 동기화합니다.
        """
        if obj_in.name is not None and obj_in.name != db_obj.name:
            existing = await self.get_by_team_and_name(db, team_name=db_obj.team_name, name=obj_in.name)
            if existing and existing.id != db_obj.id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Field with this name already exists for the team.")

            old_key, new_key = db_obj.name, obj_in.name
            if await self._has_samples_with_key(db, db_obj.team_name, old_key):
                if arq_redis_pool:
                    await arq_redis_pool.enqueue_job(
                        fields_tasks.rename_field_key_task.__name__,
                        db_obj.team_name,
                        old_key,
                        new_key,
                    )
                    logger.info("ARQ Job enqueued: rename_field_key_task for field ID %s", db_obj.id)
                else:
                    count = await fields_tasks.rename_field_key(db, db_obj.team_name, old_key, new_key)
                    logger.info("ARQ pool not available, renamed key inline in %d samples", count)

        return await super().update(db, db_obj=db_obj, obj_in=obj_in)

    async def remove(
        self,
        db: AsyncSession,
        *,
        id: int,
        arq_redis_pool: Any = None,
    ) -> fields_models.Field:
        """필드 정의를 삭제하고, 관련 시료가 있으면 data 키 제거를 동기화합니다."""
        db_obj = await self.get(db, id)
        if not db_obj:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Field not found")

        team_name, key = db_obj.team_name, db_obj.name
        has_related_samples = await self._has_samples_with_key(db, team_name, key)

        await super().delete(db, id=id)  # 먼저 필드 정의 자체를 삭제

        if has_related_samples:
            if arq_redis_pool:
                await arq_redis_pool.enqueue_job(fields_tasks.remove_field_key_task.__name__, team_name, key)
                logger.info("ARQ Job enqueued: remove_field_key_task for field ID %s", id)
            else:
                count = await fields_tasks.remove_field_key(db, team_name, key)
                logger.info("ARQ pool not available, removed key inline from %d samples", count)

        return db_obj


field = CRUDField()
