"""Translate between Kinto record bodies and domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pmrsync.domain.model import PasswordRuleRecord, RelatedRealmsRecord

from .schema import PasswordRuleRecordPayload, RelatedRealmsRecordPayload

if TYPE_CHECKING:
    from collections.abc import Mapping

_SERVER_FIELDS = {"id", "last_modified"}


def parse_related_realms_record(data: Mapping[str, object]) -> RelatedRealmsRecord:
    payload = RelatedRealmsRecordPayload.model_validate(data)
    return RelatedRealmsRecord(
        id=payload.id,
        related_realms=payload.related_realms,
        last_modified=payload.last_modified,
    )


def related_realms_record_body(record: RelatedRealmsRecord) -> dict[str, object]:
    payload = RelatedRealmsRecordPayload(
        related_realms=[list(group) for group in record.related_realms],
    )
    return payload.model_dump(by_alias=True, exclude=_SERVER_FIELDS)


def parse_password_rule_record(data: Mapping[str, object]) -> PasswordRuleRecord:
    payload = PasswordRuleRecordPayload.model_validate(data)
    return PasswordRuleRecord(
        id=payload.id,
        domain=payload.domain,
        rules=payload.rules,
        last_modified=payload.last_modified,
    )


def password_rule_record_body(record: PasswordRuleRecord) -> dict[str, object]:
    payload = PasswordRuleRecordPayload(domain=record.domain, rules=record.rules)
    return payload.model_dump(by_alias=True, exclude=_SERVER_FIELDS)
