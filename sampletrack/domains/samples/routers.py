# sampletrack/domains/samples/routers.py

"""
'samples' 도메인 (시료 관리) 관련 API 엔드포인트를 정의하는 모듈입니다.
"""
from typing import List
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import APIRouter, Depends, HTTPException, Response, status

from sampletrack.core import dependencies as deps

from . import crud as samples_crud
from . import schemas as samples_schemas

router = APIRouter(
    tags=["Samples (시료 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.get("/samples", response_model=List[samples_schemas.SampleResponse], summary="모든 시료 조회")
async def read_samples(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = 0, limit: int = 1000,
):
    return await samples_crud.sample.get_multi(db, skip=skip, limit=limit)


# '/samples/{sample_id}'보다 먼저 선언되어야 합니다.
@router.get("/samples/team/{team_name}", response_model=List[samples_schemas.SampleResponse], summary="팀의 시료 조회")
async def read_team_samples(
    team_name: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await samples_crud.sample.get_by_team(db, team_name=team_name)


@router.post("/samples", response_model=samples_schemas.SampleResponse, status_code=status.HTTP_201_CREATED, summary="새 시료 생성")
async def create_sample(
    sample_in: samples_schemas.SampleCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await samples_crud.sample.create(db=db, obj_in=sample_in)


@router.get("/samples/{sample_id}", response_model=samples_schemas.SampleResponse, summary="특정 시료 조회")
async def read_sample(
    sample_id: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    db_obj = await samples_crud.sample.get(db, sample_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sample not found")
    return db_obj


@router.put("/samples/{sample_id}", response_model=samples_schemas.SampleResponse, summary="시료 업데이트")
async def update_sample(
    sample_id: str,
    sample_in: samples_schemas.SampleUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """시료를 부분 업데이트합니다. date_created는 무시되고 date_modified는 서버에서 설정됩니다."""
    db_obj = await samples_crud.sample.get(db, sample_id)
    if not db_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sample not found")
    return await samples_crud.sample.update(db, db_obj=db_obj, obj_in=sample_in)


@router.delete("/samples/{sample_id}", status_code=status.HTTP_204_NO_CONTENT, summary="시료 삭제")
async def delete_sample(
    sample_id: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    await samples_crud.sample.remove(db, id=sample_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/samples/{sample_id}/audit", response_model=samples_schemas.SampleAuditListResponse, summary="시료 변경 이력 조회")
async def read_sample_audit(
    sample_id: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """삭제된 시료의 이력도 조회할 수 있습니다. 이력이 전혀 없으면 404를 반환합니다."""
    entries = await samples_crud.sample_audit.get_by_sample(db, sample_id=sample_id)
    if not entries:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sample audit not found")
    return samples_schemas.SampleAuditListResponse(
        sample_id=sample_id,
        entries=[samples_schemas.SampleAuditResponse.model_validate(e) for e in entries],
    )
