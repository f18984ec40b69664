"""Domain types for the synchronised Remote Settings collections."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

type RealmGroup = Sequence[str]
type RelatedRealms = Sequence[RealmGroup]
type PasswordRules = dict[str, str]


class CollectionStatus(StrEnum):
    """Review workflow states of a Remote Settings collection."""

    SIGNED = "signed"
    WORK_IN_PROGRESS = "work-in-progress"
    TO_REVIEW = "to-review"
    TO_SIGN = "to-sign"
    TO_ROLLBACK = "to-rollback"


@dataclass(slots=True, frozen=True, kw_only=True)
class RelatedRealmsRecord:
    """The single record holding every group of related realms."""

    related_realms: RelatedRealms
    id: str | None = None
    last_modified: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class PasswordRuleRecord:
    """Materialised password rule for one domain.

    ``domain`` is the reconciliation identity while ``id`` is the storage
    identity assigned by the server.
    """

    domain: str
    rules: str
    id: str | None = None
    last_modified: int | None = None


@dataclass(slots=True, frozen=True)
class CreateRecord[TRecord]:
    record: TRecord


@dataclass(slots=True, frozen=True)
class UpdateRecord[TRecord: (RelatedRealmsRecord, PasswordRuleRecord)]:
    record: TRecord

    def __post_init__(self) -> None:
        if self.record.id is None:
            raise ValueError("Cannot update a record without an id")


type RecordOperation[TRecord] = CreateRecord[TRecord] | UpdateRecord[TRecord]


@dataclass(slots=True, frozen=True)
class BatchFailure[TRecord]:
    operation: RecordOperation[TRecord]
    status: int
    message: str


@dataclass(slots=True)
class BatchResult[TRecord]:
    """Outcome of one batch submission, split by sub-request status."""

    succeeded: list[RecordOperation[TRecord]] = field(default_factory=list)
    failed: list[BatchFailure[TRecord]] = field(default_factory=list)

    @property
    def has_writes(self) -> bool:
        return bool(self.succeeded)


@dataclass(slots=True)
class SyncResult:
    """Summary of one reconciliation pass against a collection."""

    collection: str
    created: int = 0
    updated: int = 0
    failed: int = 0
    review_requested: bool = False
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.created or self.updated)
