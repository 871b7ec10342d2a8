# sampletrack/services/sample_table/table.py

"""
시료 테이블의 상태(활성 팀, 시료, 필드, 컬럼, 선택)를 한 곳에 묶는 모듈입니다.

전역 상태 대신 `SampleTable` 인스턴스가 컨텍스트를 들고 있고,
각 구성 요소(columns, codec, selection, actions)에는 필요한 값만 인자로 넘깁니다.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from . import actions
from .codec import CellEdit, RowUpdateRejected, apply_cell_edit, repack_row, unpack_row
from .columns import ColumnDescriptor, build_columns, is_cell_editable
from .selection import SelectionTracker

logger = logging.getLogger(__name__)


class SampleTable:
    def __init__(self, store: Any, team_name: Optional[str] = None):
        self.store = store
        self.team_name = team_name or ""
        self.samples: List[Dict[str, Any]] = []
        self.fields_by_team: Dict[str, List[Dict[str, Any]]] = {}
        self.selection = SelectionTracker()
        self._columns: List[ColumnDescriptor] = build_columns([])
        self._column_signature: tuple = ()

    # --- 상태 로드 ---
    async def load(self) -> List[Dict[str, Any]]:
        """활성 팀의 시료와 필드를 다시 가져오고 표시용 행을 반환합니다."""
        await self._reload()
        return self.render_rows()

    async def _reload(self) -> bool:
        samples, fields = await actions.refresh(self.store, self.team_name)
        self.samples = samples
        return self.set_fields(fields)

    @property
    def team_fields(self) -> List[Dict[str, Any]]:
        return self.fields_by_team.get(self.team_name, [])

    def set_fields(self, fields: Iterable[Mapping[str, Any]]) -> bool:
        """
        필드 목록을 팀별로 묶어 교체합니다.
        활성 팀의 필드가 실제로 바뀐 경우에만 컬럼을 다시 만들고 True를 반환합니다.
        """
        grouped: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        for field_def in fields:
            grouped[field_def["team_name"]].append(dict(field_def))
        self.fields_by_team = dict(grouped)
        return self._regenerate_columns()

    async def set_team(self, team_name: Optional[str]) -> bool:
        """
        활성 팀을 바꾸고 그 팀의 시료와 필드를 다시 가져옵니다.
        선택은 새 시료 목록에 남아 있는 항목으로 좁혀집니다. 컬럼이 바뀌었으면 True를 반환합니다.
        """
        self.team_name = team_name or ""
        changed = await self._reload()
        self.selection.on_selection_change(self.selection.ids, self.samples)
        return changed

    def _regenerate_columns(self) -> bool:
        signature = tuple(
            (f.get("name"), f.get("display_name"), f.get("value_kind")) for f in self.team_fields
        )
        if signature == self._column_signature:
            return False
        self._column_signature = signature
        self._columns = build_columns(self.team_fields)
        logger.debug("Columns regenerated for team '%s' (%d dynamic)", self.team_name, len(signature))
        return True

    # --- 표시 ---
    @property
    def columns(self) -> List[ColumnDescriptor]:
        return list(self._columns)

    @property
    def rows(self) -> List[Dict[str, Any]]:
        return self.samples

    def render_rows(self) -> List[Dict[str, Any]]:
        return [unpack_row(sample, self._columns) for sample in self.samples]

    def is_cell_editable(self, field: str) -> bool:
        return is_cell_editable(self._columns, field)

    # --- 편집 ---
    async def process_row_update(self, new_row: Mapping[str, Any], old_row: Mapping[str, Any]) -> Dict[str, Any]:
        """
        편집된 행을 업데이트 페이로드로 바꿔 저장소에 보냅니다.
        날짜 값이 잘못되었으면 `RowUpdateRejected`를 발생시키며 요청을 보내지 않습니다.
        """
        result = repack_row(new_row, old_row, self.team_fields, self.team_name or old_row.get("team_name"))
        body = result.payload.to_json()
        updated = await self.store.update_sample(result.sample_id, body)
        self._replace_sample(updated)
        return result.row

    async def process_cell_edit(self, sample_id: str, field: str, value: Any) -> Dict[str, Any]:
        sample = self._find_sample(sample_id)
        if sample is None:
            raise RowUpdateRejected(f"Unknown sample '{sample_id}'")
        old_row = unpack_row(sample, self._columns)
        new_row = apply_cell_edit(old_row, CellEdit(field, value), self._columns)
        return await self.process_row_update(new_row, old_row)

    def _find_sample(self, sample_id: str) -> Optional[Dict[str, Any]]:
        for sample in self.samples:
            if sample.get("id") == sample_id:
                return sample
        return None

    def _replace_sample(self, updated: Any) -> None:
        if not isinstance(updated, dict) or "id" not in updated:
            return
        self.samples = [updated if s.get("id") == updated["id"] else s for s in self.samples]

    # --- 선택 및 도구 모음 작업 ---
    def on_selection_change(self, selected_ids: Iterable[Any]) -> List[Dict[str, Any]]:
        return self.selection.on_selection_change(selected_ids, self.samples)

    async def delete_selected(self) -> actions.BulkDeleteResult:
        """현재 목록에 남아 있는 선택 시료만 삭제합니다. 실패한 시료는 선택 상태로 남습니다."""
        targets = self.selection.revalidate(self.samples)
        result = await actions.delete_selected(self.store, targets)
        deleted = set(result.deleted)
        self.samples = [s for s in self.samples if s.get("id") not in deleted]
        self.selection.on_selection_change(result.failed.keys(), self.samples)
        return result

    def audit_path(self) -> Optional[str]:
        return actions.audit_path(self.selection.selected)
