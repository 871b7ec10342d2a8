# tests/services/test_selection.py

from sampletrack.services.sample_table.selection import SelectionTracker

SAMPLES = [{"id": 1}, {"id": 2}, {"id": 3}]


def test_selection_filters_samples():
    tracker = SelectionTracker()
    assert tracker.on_selection_change([2, 3], SAMPLES) == [{"id": 2}, {"id": 3}]


def test_selection_keeps_source_order():
    tracker = SelectionTracker()
    assert tracker.on_selection_change([3, 2], SAMPLES) == [{"id": 2}, {"id": 3}]
    assert tracker.ids == [2, 3]


def test_selection_is_replaced_on_each_change():
    tracker = SelectionTracker()
    tracker.on_selection_change([1, 2], SAMPLES)
    tracker.on_selection_change([3], SAMPLES)
    assert tracker.selected == [{"id": 3}]


def test_unknown_ids_are_ignored():
    tracker = SelectionTracker()
    assert tracker.on_selection_change([9], SAMPLES) == []
    assert len(tracker) == 0


def test_revalidate_after_refresh():
    """목록이 새로 로드되어도 선택은 자동으로 비워지지 않고, revalidate로 남은 시료만 고릅니다."""
    tracker = SelectionTracker()
    tracker.on_selection_change([1, 3], SAMPLES)

    refreshed = [{"id": 3}, {"id": 4}]

    assert len(tracker) == 2
    assert tracker.revalidate(refreshed) == [{"id": 3}]


def test_single_and_clear():
    tracker = SelectionTracker()
    tracker.on_selection_change([2], SAMPLES)
    assert tracker.single() == {"id": 2}

    tracker.on_selection_change([1, 2], SAMPLES)
    assert tracker.single() is None

    tracker.clear()
    assert tracker.selected == []
