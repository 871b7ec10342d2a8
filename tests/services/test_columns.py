# tests/services/test_columns.py

"""
필드 정의 -> 컬럼 설명자 변환에 대한 단위 테스트입니다.
"""

import logging

import pytest

from sampletrack.domains.fields.schemas import ValueKind
from sampletrack.services.sample_table import dates
from sampletrack.services.sample_table.columns import (
    build_columns,
    is_cell_editable,
    project_columns,
)

FIELDS = [
    {"team_name": "qa-lab", "name": "batch", "display_name": "Batch", "value_kind": "text"},
    {"team_name": "qa-lab", "name": "received_date", "display_name": "Received", "value_kind": "date"},
    {"team_name": "qa-lab", "name": "site", "display_name": "Site"},
]


def test_build_columns_order():
    """id, 동적 컬럼(정의 순서), 고정 날짜 컬럼 순서로 만들어집니다."""
    columns = build_columns(FIELDS)

    assert [c.field for c in columns] == [
        "id", "batch", "received_date", "site", "date_created", "date_modified", "expiration_date",
    ]
    assert len(project_columns(FIELDS)) == len(FIELDS)


def test_build_columns_without_fields():
    assert [c.field for c in build_columns([])] == ["id", "date_created", "date_modified", "expiration_date"]


def test_value_kind_explicit_then_inferred():
    kinds = {c.field: c.value_kind for c in project_columns(FIELDS)}
    assert kinds == {"batch": ValueKind.TEXT, "received_date": ValueKind.DATE, "site": ValueKind.TEXT}

    # value_kind가 명시되면 이름 규칙보다 우선합니다.
    [column] = project_columns([{"name": "update_notes", "display_name": "Notes", "value_kind": "text"}])
    assert column.value_kind == ValueKind.TEXT
    [column] = project_columns([{"name": "update_notes", "display_name": "Notes"}])
    assert column.value_kind == ValueKind.DATE


def test_fixed_columns_editability():
    columns = build_columns(FIELDS)
    assert not is_cell_editable(columns, "id")
    assert not is_cell_editable(columns, "date_created")
    assert not is_cell_editable(columns, "date_modified")
    assert is_cell_editable(columns, "expiration_date")
    assert is_cell_editable(columns, "batch")
    assert not is_cell_editable(columns, "unknown")


def test_reserved_field_names_are_skipped(caplog):
    fields = [
        {"name": "expiration_date", "display_name": "Custom expiry"},
        {"name": "batch", "display_name": "Batch"},
    ]
    with caplog.at_level(logging.WARNING):
        columns = build_columns(fields)

    assert [c.field for c in columns].count("expiration_date") == 1
    assert next(c for c in columns if c.field == "expiration_date").header_name == "Expiration Date"
    assert "expiration_date" in caplog.text


def test_text_display_missing_is_na():
    [batch] = project_columns(FIELDS[:1])
    assert batch.display({"data": {}}) == "N/A"
    assert batch.display({"data": {"batch": None}}) == "N/A"
    assert batch.display({"data": {"batch": "B7"}}) == "B7"


def test_date_display_is_pure():
    [received] = project_columns(FIELDS[1:2])
    record = {"data": {}}
    received.display(record)
    assert record == {"data": {}}


def test_read_fills_missing_date():
    """날짜 필드 값이 없으면 현재 시각을 기록하고, 표시 값은 같은 날짜입니다."""
    [received] = project_columns(FIELDS[1:2])
    record = {"data": {}}

    shown = received.read(record)

    stored = record["data"]["received_date"]
    assert not dates.is_invalid(dates.parse_timestamp(stored))
    assert shown == dates.format_display(stored)
    assert received.ensure_default(record) is False  # 이미 채워진 값은 그대로


def test_read_keeps_existing_date():
    [received] = project_columns(FIELDS[1:2])
    record = {"data": {"received_date": "2024-03-01T09:30:00+00:00"}}
    assert received.read(record) == "03/01/2024"
    assert record["data"]["received_date"] == "2024-03-01T09:30:00+00:00"


def test_write_without_record_is_noop():
    [batch, received] = project_columns(FIELDS[:2])
    assert batch.write("B8") is None
    assert received.write("03/02/2024", None) is None


def test_write_normalizes_dates_into_data():
    [batch, received] = project_columns(FIELDS[:2])
    record = {"data": {}}

    assert received.write("03/02/2024", record) == "2024-03-02T00:00:00+00:00"
    assert batch.write("B8", record) == "B8"
    assert record["data"] == {"received_date": "2024-03-02T00:00:00+00:00", "batch": "B8"}


def test_write_keeps_invalid_date_marker():
    """해석할 수 없는 날짜는 None이 아니라 InvalidDate로 기록됩니다."""
    [received] = project_columns(FIELDS[1:2])
    record = {"data": {}}

    stored = received.write("garbage", record)

    assert dates.is_invalid(stored)
    assert dates.is_invalid(record["data"]["received_date"])


def test_expiration_writer_targets_expiration_date():
    columns = build_columns([])
    expiration = next(c for c in columns if c.field == "expiration_date")
    record = {"date_created": "2024-01-01T00:00:00+00:00", "data": {}}

    expiration.write("06/30/2025", record)

    assert record["expiration_date"] == "2025-06-30T00:00:00+00:00"
    assert record["date_created"] == "2024-01-01T00:00:00+00:00"


@pytest.mark.parametrize("value, shown", [(None, ""), ("2024-03-01T00:00:00+00:00", "03/01/2024"), ("bad", "Invalid DateTime")])
def test_fixed_date_display(value, shown):
    expiration = build_columns([])[-1]
    assert expiration.display({"expiration_date": value}) == shown
