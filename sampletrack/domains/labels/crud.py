# sampletrack/domains/labels/crud.py

"""
'labels' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

import logging
from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from sampletrack.core.crud_base import CRUDBase
from sampletrack.domains.teams.crud import team as team_crud

from . import models as labels_models
from . import schemas as labels_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 라벨 양식 (Label) CRUD
# =============================================================================
class CRUDLabel(CRUDBase[labels_models.Label, labels_schemas.LabelCreate, labels_schemas.LabelCreate]):
    default_order = ("team_name", "id")

    def __init__(self):
        super().__init__(model=labels_models.Label)

    async def get_by_team(self, db: AsyncSession, *, team_name: str) -> List[labels_models.Label]:
        statement = select(self.model).where(self.model.team_name == team_name).order_by(self.model.id)
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def create_for_team(
        self, db: AsyncSession, *, team_name: str, obj_in: labels_schemas.LabelCreate
    ) -> labels_models.Label:
        """
        팀의 새 라벨 양식을 생성합니다.
        활성 라벨이면 같은 팀, 같은 크기(width x height)의 다른 활성 라벨을 비활성화합니다.
        """
        await team_crud.get_or_404(db, team_name)

        if obj_in.is_active:
            statement = select(self.model).where(
                self.model.team_name == team_name,
                self.model.width == obj_in.width,
                self.model.height == obj_in.height,
                self.model.is_active == True,  # noqa: E712
            )
            result = await db.execute(statement)
            for other in result.scalars().all():
                other.is_active = False
                db.add(other)
                logger.info("Label %s deactivated by new active label for team '%s'", other.id, team_name)

        db_obj = self.model(team_name=team_name, **obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj


label = CRUDLabel()
