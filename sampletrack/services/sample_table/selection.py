# sampletrack/services/sample_table/selection.py

from typing import Any, Dict, Iterable, List, Optional, Sequence


class SelectionTracker:
    """
    테이블에서 선택된 시료 목록을 관리합니다.

    선택은 참고용입니다. 시료 목록이 다시 로드되어도 자동으로 비워지지 않으므로
    일괄 작업 전에는 `revalidate()`로 현재 목록에 남아 있는 시료만 골라야 합니다.
    """

    def __init__(self):
        self._selected: List[Dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self._selected)

    @property
    def selected(self) -> List[Dict[str, Any]]:
        return list(self._selected)

    @property
    def ids(self) -> List[Any]:
        return [sample.get("id") for sample in self._selected]

    def on_selection_change(
        self, selected_ids: Iterable[Any], samples: Sequence[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """선택된 id의 시료만 원래 목록 순서대로 골라 선택을 교체합니다."""
        wanted = set(selected_ids)
        self._selected = [sample for sample in samples if sample.get("id") in wanted]
        return self.selected

    def revalidate(self, samples: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
        present = {sample.get("id") for sample in samples}
        return [sample for sample in self._selected if sample.get("id") in present]

    def single(self) -> Optional[Dict[str, Any]]:
        return self._selected[0] if len(self._selected) == 1 else None

    def clear(self) -> None:
        self._selected = []
