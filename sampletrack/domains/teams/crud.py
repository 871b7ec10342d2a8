# sampletrack/domains/teams/crud.py

"""
'teams' 도메인의 CRUD 로직을 담당하는 모듈입니다.
"""

from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import HTTPException, status

from sampletrack.core.crud_base import CRUDBase

from . import models as teams_models
from . import schemas as teams_schemas


# =============================================================================
# 1. 팀 (Team) CRUD
# =============================================================================
class CRUDTeam(CRUDBase[teams_models.Team, teams_schemas.TeamCreate, teams_schemas.TeamCreate]):
    default_order = ("name",)

    def __init__(self):
        super().__init__(model=teams_models.Team)

    async def create(self, db: AsyncSession, *, obj_in: teams_schemas.TeamCreate) -> teams_models.Team:
        """팀 이름 중복을 확인하고 생성합니다."""
        if await self.get(db, obj_in.name):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Team with this name already exists.")
        return await super().create(db, obj_in=obj_in)

    async def get_or_404(self, db: AsyncSession, name: str) -> teams_models.Team:
        """다른 도메인에서 팀 FK를 검증할 때 사용합니다."""
        db_obj = await self.get(db, name)
        if not db_obj:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found.")
        return db_obj


team = CRUDTeam()
