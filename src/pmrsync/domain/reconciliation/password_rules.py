"""Plan the batch that turns per-domain records into a mirror of the source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pmrsync.domain.errors import DataIntegrityError
from pmrsync.domain.model import CreateRecord, PasswordRuleRecord, UpdateRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pmrsync.domain.model import RecordOperation


def index_by_domain(records: Iterable[PasswordRuleRecord]) -> dict[str, PasswordRuleRecord]:
    """Index destination records by domain, rejecting repeated domains."""

    index: dict[str, PasswordRuleRecord] = {}
    duplicates: list[str] = []
    for record in records:
        if record.domain in index:
            duplicates.append(record.domain)
            continue
        index[record.domain] = record

    if duplicates:
        listed = ", ".join(sorted(set(duplicates)))
        raise DataIntegrityError(f"Duplicate password rule records for: {listed}")

    return index


def plan_password_rule_operations(
    source: Mapping[str, str],
    destination: Iterable[PasswordRuleRecord],
) -> list[RecordOperation[PasswordRuleRecord]]:
    """Return create/update operations in source order.

    Records whose domain no longer appears in ``source`` are left alone.
    """

    existing = index_by_domain(destination)
    operations: list[RecordOperation[PasswordRuleRecord]] = []

    for domain, rules in source.items():
        current = existing.get(domain)
        if current is None:
            operations.append(CreateRecord(PasswordRuleRecord(domain=domain, rules=rules)))
        elif current.rules != rules:
            operations.append(
                UpdateRecord(
                    PasswordRuleRecord(
                        id=current.id,
                        domain=domain,
                        rules=rules,
                        last_modified=current.last_modified,
                    )
                )
            )

    return operations


def merge_password_rules(
    primary: Mapping[str, str],
    fallback: Mapping[str, str],
) -> dict[str, str]:
    """Overlay ``primary`` on ``fallback``; fallback-only domains follow in their own order."""

    merged = dict(primary)
    for domain, rules in fallback.items():
        merged.setdefault(domain, rules)
    return merged
