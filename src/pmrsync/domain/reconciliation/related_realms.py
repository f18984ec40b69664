"""Decide how the related realms record must change to match the source.

The collection holds a single record whose ``relatedRealms`` value is the whole
source list. Any difference, including a reordering, replaces the full list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pmrsync.domain.errors import DataIntegrityError
from pmrsync.domain.model import CreateRecord, RelatedRealmsRecord, UpdateRecord

from .equality import sequences_equal

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pmrsync.domain.model import RecordOperation, RelatedRealms

type RelatedRealmsDecision = RecordOperation[RelatedRealmsRecord] | None


def single_related_realms_record(
    records: Sequence[RelatedRealmsRecord],
) -> RelatedRealmsRecord | None:
    """Return the collection's only record, or ``None`` when it is empty."""

    if len(records) > 1:
        ids = ", ".join(str(record.id) for record in records)
        raise DataIntegrityError(
            f"Expected at most one related realms record, found {len(records)}: {ids}"
        )
    return records[0] if records else None


def related_realms_stale(source: RelatedRealms, destination: RelatedRealms) -> bool:
    # Length mismatch short-circuits; otherwise stop at the first differing group.
    if len(source) != len(destination):
        return True
    return any(
        not sequences_equal(source_group, destination[index])
        for index, source_group in enumerate(source)
    )


def reconcile_related_realms(
    source: RelatedRealms,
    current: RelatedRealmsRecord | None,
) -> RelatedRealmsDecision:
    """Return the single write needed for ``current`` to mirror ``source``.

    ``None`` means the stored record is already up to date.
    """

    if current is None:
        return CreateRecord(RelatedRealmsRecord(related_realms=source))
    if not related_realms_stale(source, current.related_realms):
        return None
    return UpdateRecord(
        RelatedRealmsRecord(
            id=current.id,
            related_realms=source,
            last_modified=current.last_modified,
        )
    )
