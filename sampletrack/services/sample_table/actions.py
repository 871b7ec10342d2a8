# sampletrack/services/sample_table/actions.py

"""
시료 테이블 도구 모음(toolbar)의 일괄 작업입니다.

`store`는 `SampleStoreClient`와 같은 메서드를 가진 비동기 객체면 됩니다.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass
class BulkDeleteResult:
    deleted: List[str] = field(default_factory=list)
    failed: Dict[str, BaseException] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


async def delete_selected(store: Any, samples: Sequence[Dict[str, Any]]) -> BulkDeleteResult:
    """
    선택된 시료마다 독립적인 삭제 요청을 동시에 보냅니다.
    일부 요청이 실패해도 나머지 요청은 모두 실행되며, 실패는 결과에 모아 반환합니다.
    """
    sample_ids = [sample["id"] for sample in samples]
    outcomes = await asyncio.gather(
        *(store.delete_sample(sample_id) for sample_id in sample_ids),
        return_exceptions=True,
    )

    result = BulkDeleteResult()
    for sample_id, outcome in zip(sample_ids, outcomes):
        if isinstance(outcome, BaseException):
            logger.warning("Failed to delete sample %s: %s", sample_id, outcome)
            result.failed[sample_id] = outcome
        else:
            result.deleted.append(sample_id)

    logger.info("Bulk delete finished: %d deleted, %d failed", len(result.deleted), len(result.failed))
    return result


async def refresh(store: Any, team_name: Optional[str]) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """활성 팀의 시료와 필드 정의를 다시 가져옵니다. 팀이 없으면 전체를 가져옵니다."""
    if not team_name:
        samples, fields = await asyncio.gather(store.fetch_all_samples(), store.fetch_all_fields())
    else:
        samples, fields = await asyncio.gather(
            store.fetch_team_samples(team_name),
            store.fetch_team_fields(team_name),
        )
    return list(samples), list(fields)


def audit_path(selection: Sequence[Dict[str, Any]]) -> Optional[str]:
    """시료가 정확히 하나 선택되었을 때만 이력 화면 경로를 반환합니다."""
    if len(selection) != 1:
        return None
    return f"/samples/audit/{selection[0]['id']}"
