# sampletrack/domains/labels/routers.py

"""
'labels' 도메인 (라벨 양식) 관련 API 엔드포인트를 정의하는 모듈입니다.
라벨 이미지 생성/인쇄는 외부 서브시스템이 담당하므로 여기서는 제공하지 않습니다.
"""
from typing import List
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import APIRouter, Depends, status

from sampletrack.core import dependencies as deps

from . import crud as labels_crud
from . import schemas as labels_schemas

router = APIRouter(
    tags=["Labels (라벨 양식)"],
    responses={404: {"description": "Not found"}},
)


@router.get("/labels", response_model=List[labels_schemas.LabelResponse], summary="모든 라벨 양식 조회")
async def read_labels(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = 0, limit: int = 100,
):
    return await labels_crud.label.get_multi(db, skip=skip, limit=limit)


@router.get("/labels/team/{team_name}", response_model=List[labels_schemas.LabelResponse], summary="팀의 라벨 양식 조회")
async def read_team_labels(
    team_name: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await labels_crud.label.get_by_team(db, team_name=team_name)


@router.post("/labels/team/{team_name}", response_model=labels_schemas.LabelResponse, status_code=status.HTTP_201_CREATED, summary="팀의 새 라벨 양식 생성")
async def create_team_label(
    team_name: str,
    label_in: labels_schemas.LabelCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await labels_crud.label.create_for_team(db, team_name=team_name, obj_in=label_in)
