# sampletrack/domains/teams/routers.py

"""
'teams' 도메인 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import APIRouter, Depends, HTTPException, status

from sampletrack.core import dependencies as deps

from . import crud as teams_crud
from . import schemas as teams_schemas

router = APIRouter(
    tags=["Teams (팀 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/teams", response_model=teams_schemas.TeamResponse, status_code=status.HTTP_201_CREATED, summary="새 팀 생성")
async def create_team(
    team_in: teams_schemas.TeamCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await teams_crud.team.create(db=db, obj_in=team_in)


@router.get("/teams", response_model=List[teams_schemas.TeamResponse], summary="모든 팀 조회")
async def read_teams(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = 0, limit: int = 100,
):
    return await teams_crud.team.get_multi(db, skip=skip, limit=limit)


@router.get("/teams/{team_name}", response_model=teams_schemas.TeamResponse, summary="특정 팀 조회")
async def read_team(
    team_name: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    db_obj = await teams_crud.team.get(db, team_name)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Team not found")
    return db_obj
