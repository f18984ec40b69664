"""Application services reconciling Remote Settings collections with their sources."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pmrsync.domain.errors import BatchWriteError
from pmrsync.domain.model import CollectionStatus, CreateRecord, SyncResult
from pmrsync.domain.reconciliation import (
    plan_password_rule_operations,
    reconcile_related_realms,
    single_related_realms_record,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pmrsync.domain.model import PasswordRuleRecord, RecordOperation
    from pmrsync.domain.ports import (
        PasswordRulesFetcher,
        PasswordRulesStore,
        RelatedRealmsFetcher,
        RelatedRealmsStore,
        ReviewableCollection,
    )

log = getLogger(__name__)


def request_review(store: ReviewableCollection) -> None:
    """Flag the collection so that the pending changes get a human review."""

    store.set_status(CollectionStatus.TO_REVIEW)
    log.info("Requested review for %s", store.name)


def sync_related_realms(
    *,
    fetcher: RelatedRealmsFetcher,
    store: RelatedRealmsStore,
    dry_run: bool = False,
) -> SyncResult:
    """Create or replace the related realms record when the source changed."""

    result = SyncResult(collection=store.name, dry_run=dry_run)

    source = fetcher()
    current = single_related_realms_record(store.list_records())
    decision = reconcile_related_realms(source, current)

    if decision is None:
        log.info("No new records! Not committing any changes to %s", store.name)
        return result

    is_create = isinstance(decision, CreateRecord)
    if dry_run:
        log.info(
            "Dry run: would %s the related realms record in %s (%s groups)",
            "create" if is_create else "update",
            store.name,
            len(source),
        )
        return result

    if is_create:
        created = store.create_record(decision.record)
        result.created = 1
        log.info("Added new record %s to %s", created.id, store.name)
    else:
        store.update_record(decision.record)
        result.updated = 1
        log.info("Found new records, updated %s in %s", decision.record.id, store.name)

    request_review(store)
    result.review_requested = True
    return result


def sync_password_rules(
    *,
    fetcher: PasswordRulesFetcher,
    store: PasswordRulesStore,
    dry_run: bool = False,
) -> SyncResult:
    """Submit one batch creating or updating every out-of-date password rule."""

    result = SyncResult(collection=store.name, dry_run=dry_run)

    source = fetcher()
    operations = plan_password_rule_operations(source, store.list_records())
    creates, updates = _count_operations(operations)
    log.info(
        "Planned %s operations for %s: create=%s, update=%s",
        len(operations),
        store.name,
        creates,
        updates,
    )

    if not operations:
        log.info("No new records! Not committing any changes to %s", store.name)
        return result

    if dry_run:
        for operation in operations:
            log.info(
                "Dry run: would %s %s",
                "create" if isinstance(operation, CreateRecord) else "update",
                operation.record.domain,
            )
        return result

    batch_result = store.batch(operations)
    result.created, result.updated = _count_operations(batch_result.succeeded)
    result.failed = len(batch_result.failed)

    for failure in batch_result.failed:
        log.warning(
            "Batch write for %s rejected with status %s: %s",
            failure.operation.record.domain,
            failure.status,
            failure.message,
        )

    if batch_result.has_writes:
        request_review(store)
        result.review_requested = True

    if batch_result.failed:
        raise BatchWriteError(
            f"{len(batch_result.failed)} of {len(operations)} writes to {store.name} failed",
            result=batch_result,
        )

    return result


def _count_operations(
    operations: Sequence[RecordOperation[PasswordRuleRecord]],
) -> tuple[int, int]:
    creates = sum(1 for operation in operations if isinstance(operation, CreateRecord))
    return creates, len(operations) - creates
