"""In-memory stand-ins for the fetcher and store ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING

from pmrsync.domain.model import (
    BatchFailure,
    BatchResult,
    CollectionStatus,
    CreateRecord,
    PasswordRuleRecord,
    RelatedRealmsRecord,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pmrsync.domain.model import RecordOperation

_ids = count(1)


def _next_id() -> str:
    return f"record-{next(_ids)}"


@dataclass
class StaticFetcher[T]:
    payload: T
    calls: int = 0

    def __call__(self) -> T:
        self.calls += 1
        return self.payload


@dataclass
class FakeRelatedRealmsStore:
    records: list[RelatedRealmsRecord] = field(default_factory=list)
    name: str = "websites-with-shared-credential-backends"
    statuses: list[CollectionStatus] = field(default_factory=list)
    created: list[RelatedRealmsRecord] = field(default_factory=list)
    updated: list[RelatedRealmsRecord] = field(default_factory=list)

    def list_records(self) -> list[RelatedRealmsRecord]:
        return list(self.records)

    def create_record(self, record: RelatedRealmsRecord) -> RelatedRealmsRecord:
        stored = RelatedRealmsRecord(id=_next_id(), related_realms=record.related_realms)
        self.records.append(stored)
        self.created.append(stored)
        return stored

    def update_record(self, record: RelatedRealmsRecord) -> RelatedRealmsRecord:
        self.records = [
            record if existing.id == record.id else existing for existing in self.records
        ]
        self.updated.append(record)
        return record

    def set_status(self, status: CollectionStatus) -> None:
        self.statuses.append(status)


@dataclass
class FakePasswordRulesStore:
    records: list[PasswordRuleRecord] = field(default_factory=list)
    name: str = "password-rules"
    statuses: list[CollectionStatus] = field(default_factory=list)
    batches: list[list[RecordOperation[PasswordRuleRecord]]] = field(default_factory=list)
    reject_domains: set[str] = field(default_factory=set)

    def list_records(self) -> list[PasswordRuleRecord]:
        return list(self.records)

    def batch(
        self,
        operations: Sequence[RecordOperation[PasswordRuleRecord]],
    ) -> BatchResult[PasswordRuleRecord]:
        self.batches.append(list(operations))
        result: BatchResult[PasswordRuleRecord] = BatchResult()
        for operation in operations:
            record = operation.record
            if record.domain in self.reject_domains:
                result.failed.append(BatchFailure(operation, status=400, message="rejected"))
                continue
            if isinstance(operation, CreateRecord):
                self.records.append(
                    PasswordRuleRecord(id=_next_id(), domain=record.domain, rules=record.rules)
                )
            else:
                self.records = [
                    record if existing.id == record.id else existing for existing in self.records
                ]
            result.succeeded.append(operation)
        return result

    def set_status(self, status: CollectionStatus) -> None:
        self.statuses.append(status)
