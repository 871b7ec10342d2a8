# sampletrack/domains/fields/tasks.py

"""
필드 정의가 변경/삭제되었을 때 팀 시료들의 data 맵 키를 동기화하는 작업 모듈입니다.

`rename_field_key` / `remove_field_key`는 주어진 세션에서 바로 실행되는 본체이고,
`*_task` 함수는 ARQ 워커가 실행하는 래퍼입니다.
"""

import logging
from typing import Any, Dict

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from sampletrack.core.database import get_async_session_context
from sampletrack.domains.samples import models as samples_models

logger = logging.getLogger(__name__)


async def _team_samples(db: AsyncSession, team_name: str):
    query = select(samples_models.Sample).where(samples_models.Sample.team_name == team_name)
    result = await db.execute(query)
    return result.scalars().all()


async def rename_field_key(db: AsyncSession, team_name: str, old_key: str, new_key: str) -> int:
    """
    팀의 모든 시료에서 data[old_key]를 data[new_key]로 옮기고, 변경된 시료 수를 반환합니다.
    이미 new_key 값을 가진 시료는 덮어쓰지 않고 건너뜁니다.
    """
    update_count = 0
    for sample in await _team_samples(db, team_name):
        if old_key not in sample.data:
            continue
        if new_key in sample.data:
            logger.warning(
                "Sample %s already has data key '%s'; keeping it and leaving '%s' unchanged",
                sample.id, new_key, old_key,
            )
            continue
        new_data = dict(sample.data)
        new_data[new_key] = new_data.pop(old_key)
        sample.data = new_data  # SQLAlchemy가 변경을 감지하도록 재할당
        db.add(sample)
        update_count += 1

    if update_count > 0:
        await db.commit()
    return update_count


async def remove_field_key(db: AsyncSession, team_name: str, key: str) -> int:
    """팀의 모든 시료에서 data[key]를 제거하고, 변경된 시료 수를 반환합니다."""
    update_count = 0
    for sample in await _team_samples(db, team_name):
        if key not in sample.data:
            continue
        new_data = dict(sample.data)
        new_data.pop(key, None)
        sample.data = new_data
        db.add(sample)
        update_count += 1

    if update_count > 0:
        await db.commit()
    return update_count


async def rename_field_key_task(
    ctx: Dict[str, Any], team_name: str, old_key: str, new_key: str
) -> Dict[str, Any]:
    """필드 이름 변경을 팀 시료 data 맵에 반영하는 ARQ 작업."""
    logger.info("백그라운드 작업 시작: 팀 '%s' 필드 키 '%s' -> '%s'", team_name, old_key, new_key)
    async with get_async_session_context() as db:
        update_count = await rename_field_key(db, team_name, old_key, new_key)
    logger.info("작업 완료! 총 %d개 시료의 필드 키 변경됨.", update_count)
    return {"status": "ok", "updated_count": update_count}


async def remove_field_key_task(
    ctx: Dict[str, Any], team_name: str, key: str
) -> Dict[str, Any]:
    """필드 삭제를 팀 시료 data 맵에 반영하는 ARQ 작업."""
    logger.info("백그라운드 작업 시작: 팀 '%s' 필드 키 '%s' 제거", team_name, key)
    async with get_async_session_context() as db:
        update_count = await remove_field_key(db, team_name, key)
    logger.info("작업 완료! 총 %d개 시료에서 필드 키 제거됨.", update_count)
    return {"status": "ok", "updated_count": update_count}
