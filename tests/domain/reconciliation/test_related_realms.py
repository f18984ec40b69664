from __future__ import annotations

import pytest

from pmrsync.domain.errors import DataIntegrityError
from pmrsync.domain.model import CreateRecord, RelatedRealmsRecord, UpdateRecord
from pmrsync.domain.reconciliation import (
    reconcile_related_realms,
    related_realms_stale,
    single_related_realms_record,
)


def _stored(related_realms: list[list[str]]) -> RelatedRealmsRecord:
    return RelatedRealmsRecord(id="abc", related_realms=related_realms, last_modified=42)


def test_matching_lists_produce_no_operation() -> None:
    decision = reconcile_related_realms(
        [["a.com", "b.com"]],
        _stored([["a.com", "b.com"]]),
    )

    assert decision is None


def test_length_mismatch_replaces_the_full_list() -> None:
    source = [["a.com", "b.com"], ["c.com"]]

    decision = reconcile_related_realms(source, _stored([["a.com", "b.com"]]))

    assert isinstance(decision, UpdateRecord)
    assert decision.record.id == "abc"
    assert decision.record.related_realms == source


def test_changed_group_triggers_update() -> None:
    decision = reconcile_related_realms(
        [["a.com", "b.com"], ["c.com", "d.com"]],
        _stored([["a.com", "b.com"], ["c.com"]]),
    )

    assert isinstance(decision, UpdateRecord)


def test_reordered_groups_count_as_change() -> None:
    assert related_realms_stale([["b.com"], ["a.com"]], [["a.com"], ["b.com"]])
    assert related_realms_stale([["a.com", "b.com"]], [["b.com", "a.com"]])


@pytest.mark.parametrize("source", [[], [["a.com", "b.com"]]])
def test_absent_record_always_creates(source: list[list[str]]) -> None:
    decision = reconcile_related_realms(source, None)

    assert isinstance(decision, CreateRecord)
    assert decision.record.id is None
    assert decision.record.related_realms == source


def test_empty_source_and_empty_record_are_consistent() -> None:
    assert reconcile_related_realms([], _stored([])) is None


def test_single_record_selection() -> None:
    record = _stored([["a.com"]])

    assert single_related_realms_record([]) is None
    assert single_related_realms_record([record]) is record


def test_multiple_records_are_a_data_integrity_error() -> None:
    records = [_stored([["a.com"]]), RelatedRealmsRecord(id="def", related_realms=[])]

    with pytest.raises(DataIntegrityError, match="abc, def"):
        single_related_realms_record(records)


def test_update_requires_an_id() -> None:
    with pytest.raises(ValueError, match="without an id"):
        UpdateRecord(RelatedRealmsRecord(related_realms=[]))
