"""Ports implemented by source fetchers and destination stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import (
        BatchResult,
        CollectionStatus,
        PasswordRuleRecord,
        PasswordRules,
        RecordOperation,
        RelatedRealms,
        RelatedRealmsRecord,
    )


@runtime_checkable
class RelatedRealmsFetcher(Protocol):
    """Callable port returning the authoritative related realms list."""

    def __call__(self) -> RelatedRealms: ...


@runtime_checkable
class PasswordRulesFetcher(Protocol):
    """Callable port returning the authoritative ``domain -> rules`` mapping."""

    def __call__(self) -> PasswordRules: ...


@runtime_checkable
class ReviewableCollection(Protocol):
    """A destination collection carrying review-status metadata."""

    @property
    def name(self) -> str: ...

    def set_status(self, status: CollectionStatus) -> None: ...


@runtime_checkable
class RelatedRealmsStore(ReviewableCollection, Protocol):
    def list_records(self) -> list[RelatedRealmsRecord]: ...

    def create_record(self, record: RelatedRealmsRecord) -> RelatedRealmsRecord: ...

    def update_record(self, record: RelatedRealmsRecord) -> RelatedRealmsRecord: ...


@runtime_checkable
class PasswordRulesStore(ReviewableCollection, Protocol):
    def list_records(self) -> list[PasswordRuleRecord]: ...

    def batch(
        self,
        operations: Sequence[RecordOperation[PasswordRuleRecord]],
    ) -> BatchResult[PasswordRuleRecord]: ...


__all__ = [
    "PasswordRulesFetcher",
    "PasswordRulesStore",
    "RelatedRealmsFetcher",
    "RelatedRealmsStore",
    "ReviewableCollection",
]
