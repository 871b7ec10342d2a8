# sampletrack/domains/fields/routers.py

"""
'fields' 도메인 (팀별 사용자 정의 필드) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import Any, List, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import APIRouter, Depends, HTTPException, Response, status

from sampletrack.core import dependencies as deps

from . import crud as fields_crud
from . import schemas as fields_schemas

router = APIRouter(
    tags=["Fields (팀 필드 정의)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/fields", response_model=fields_schemas.FieldResponse, status_code=status.HTTP_201_CREATED, summary="새 필드 정의 생성")
async def create_field(
    field_in: fields_schemas.FieldCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await fields_crud.field.create(db=db, obj_in=field_in)


@router.get("/fields", response_model=List[fields_schemas.FieldResponse], summary="모든 필드 정의 조회")
async def read_fields(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = 0, limit: int = 1000,
):
    return await fields_crud.field.get_multi(db, skip=skip, limit=limit)


@router.get("/fields/team/{team_name}", response_model=List[fields_schemas.FieldResponse], summary="팀의 필드 정의 조회 (컬럼 순서)")
async def read_team_fields(
    team_name: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await fields_crud.field.get_by_team(db, team_name=team_name)


@router.put("/fields/{field_id}", response_model=fields_schemas.FieldResponse, summary="필드 정의 업데이트")
async def update_field(
    field_id: int,
    field_in: fields_schemas.FieldUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    arq_redis_pool: Optional[Any] = Depends(deps.get_task_queue),
):
    """필드 정의를 업데이트합니다. 이름 변경 시 팀 시료의 data 키가 함께 변경됩니다."""
    db_obj = await fields_crud.field.get(db, field_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Field not found")
    return await fields_crud.field.update(db, db_obj=db_obj, obj_in=field_in, arq_redis_pool=arq_redis_pool)


@router.delete("/fields/{field_id}", status_code=status.HTTP_204_NO_CONTENT, summary="필드 정의 삭제")
async def delete_field(
    field_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    arq_redis_pool: Optional[Any] = Depends(deps.get_task_queue),
):
    """필드 정의를 삭제합니다. 팀 시료의 data 맵에서도 해당 키가 제거됩니다."""
    await fields_crud.field.remove(db, id=field_id, arq_redis_pool=arq_redis_pool)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
