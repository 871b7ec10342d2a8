# sampletrack/domains/samples/crud.py

"""
'samples' 도메인의 CRUD 로직을 담당하는 모듈입니다.

시료의 생성/수정/삭제 시마다 sample_audits 테이블에 스냅샷을 남깁니다.
"""

import logging
from datetime import datetime, UTC
from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from sampletrack.core.crud_base import CRUDBase
from sampletrack.domains.teams.crud import team as team_crud

from . import models as samples_models
from . import schemas as samples_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 시료 이력 (SampleAudit) CRUD
# =============================================================================
class CRUDSampleAudit(CRUDBase[samples_models.SampleAudit, samples_schemas.SampleAuditResponse, samples_schemas.SampleAuditResponse]):
    default_order = ("sample_id", "audit_number")

    def __init__(self):
        super().__init__(model=samples_models.SampleAudit)

    async def get_by_sample(self, db: AsyncSession, *, sample_id: str) -> List[samples_models.SampleAudit]:
        statement = (
            select(self.model)
            .where(self.model.sample_id == sample_id)
            .order_by(self.model.audit_number)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def _next_audit_number(self, db: AsyncSession, sample_id: str) -> int:
        statement = select(func.max(self.model.audit_number)).where(self.model.sample_id == sample_id)
        result = await db.execute(statement)
        return (result.scalar_one_or_none() or 0) + 1

    async def record(self, db: AsyncSession, *, sample: samples_models.Sample, action: str) -> samples_models.SampleAudit:
        """
        시료의 현재 상태를 이력으로 세션에 추가합니다. 커밋은 호출한 쪽에서 합니다.
        """
        entry = self.model(
            sample_id=sample.id,
            audit_number=await self._next_audit_number(db, sample.id),
            action=action,
            team_name=sample.team_name,
            expiration_date=sample.expiration_date,
            date_created=sample.date_created,
            date_modified=sample.date_modified,
            data=dict(sample.data or {}),
        )
        db.add(entry)
        return entry


sample_audit = CRUDSampleAudit()


# =============================================================================
# 2. 시료 (Sample) CRUD
# =============================================================================
class CRUDSample(CRUDBase[samples_models.Sample, samples_schemas.SampleCreate, samples_schemas.SampleUpdate]):
    default_order = ("date_created", "id")

    def __init__(self):
        super().__init__(model=samples_models.Sample)

    async def get_by_team(self, db: AsyncSession, *, team_name: str) -> List[samples_models.Sample]:
        statement = (
            select(self.model)
            .where(self.model.team_name == team_name)
            .order_by(self.model.date_created, self.model.id)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: samples_schemas.SampleCreate) -> samples_models.Sample:
        """팀 존재 여부를 확인하고 시료를 생성한 뒤 'create' 이력을 남깁니다."""
        await team_crud.get_or_404(db, obj_in.team_name)

        now = datetime.now(UTC)
        db_obj = self.model(
            team_name=obj_in.team_name,
            expiration_date=obj_in.expiration_date,
            data=dict(obj_in.data),
            date_created=now,
            date_modified=now,
        )
        db.add(db_obj)
        await db.flush()
        await sample_audit.record(db, sample=db_obj, action="create")
        await db.commit()
        await db.refresh(db_obj)
        logger.info("Sample %s created for team '%s'", db_obj.id, db_obj.team_name)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: samples_models.Sample,
        obj_in: samples_schemas.SampleUpdate,
    ) -> samples_models.Sample:
        """
        부분 업데이트를 적용합니다.
        date_created는 무시되고 date_modified는 항상 현재 시각으로 재설정됩니다.
        data가 주어지면 전체가 교체됩니다.
        """
        update_data = obj_in.model_dump(exclude_unset=True, exclude={"date_created", "date_modified"})

        new_team = update_data.get("team_name")
        if new_team is not None and new_team != db_obj.team_name:
            await team_crud.get_or_404(db, new_team)

        for key, value in update_data.items():
            if key in ("team_name", "data") and value is None:
                continue  # NOT NULL 컬럼
            setattr(db_obj, key, dict(value) if key == "data" else value)
        db_obj.date_modified = datetime.now(UTC)

        db.add(db_obj)
        await sample_audit.record(db, sample=db_obj, action="update")
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, id: str) -> samples_models.Sample:
        db_obj = await self.get(db, id)
        if not db_obj:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sample not found")

        await sample_audit.record(db, sample=db_obj, action="delete")
        await db.delete(db_obj)
        await db.commit()
        logger.info("Sample %s deleted", id)
        return db_obj


sample = CRUDSample()
