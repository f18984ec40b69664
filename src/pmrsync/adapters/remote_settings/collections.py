"""Typed stores over Remote Settings collections, implementing the domain ports."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pmrsync.domain.model import (
    BatchFailure,
    BatchResult,
    CreateRecord,
    PasswordRuleRecord,
    RelatedRealmsRecord,
    UpdateRecord,
)

from .client import RemoteSettingsAPIError, RemoteSettingsClient
from .schema import BatchRequest
from .translator import (
    parse_password_rule_record,
    parse_related_realms_record,
    password_rule_record_body,
    related_realms_record_body,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pmrsync.config.remote_settings import RemoteSettingsConfig
    from pmrsync.domain.model import CollectionStatus, RecordOperation
    from pmrsync.domain.ports import PasswordRulesStore, RelatedRealmsStore

log = getLogger(__name__)


class _Collection:
    def __init__(self, client: RemoteSettingsClient, name: str) -> None:
        self._client = client
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def set_status(self, status: CollectionStatus) -> None:
        # The current timestamp is sent back as-is; no If-Match precondition.
        current = self._client.get_collection_data(self._name)
        patch: dict[str, object] = {"status": str(status)}
        if "last_modified" in current:
            patch["last_modified"] = current["last_modified"]
        self._client.patch_collection_data(self._name, patch)


class RelatedRealmsCollection(_Collection):
    def list_records(self) -> list[RelatedRealmsRecord]:
        return [
            parse_related_realms_record(data) for data in self._client.list_records(self._name)
        ]

    def create_record(self, record: RelatedRealmsRecord) -> RelatedRealmsRecord:
        created = self._client.create_record(self._name, related_realms_record_body(record))
        return parse_related_realms_record(created)

    def update_record(self, record: RelatedRealmsRecord) -> RelatedRealmsRecord:
        if record.id is None:
            raise ValueError("Cannot update a related realms record without an id")
        updated = self._client.update_record(
            self._name,
            record.id,
            related_realms_record_body(record),
        )
        return parse_related_realms_record(updated)


class PasswordRulesCollection(_Collection):
    def list_records(self) -> list[PasswordRuleRecord]:
        return [
            parse_password_rule_record(data) for data in self._client.list_records(self._name)
        ]

    def batch(
        self,
        operations: Sequence[RecordOperation[PasswordRuleRecord]],
    ) -> BatchResult[PasswordRuleRecord]:
        result: BatchResult[PasswordRuleRecord] = BatchResult()
        if not operations:
            return result

        requests = [self._batch_request(operation) for operation in operations]
        responses = self._client.batch(requests)
        if len(responses) != len(operations):
            raise RemoteSettingsAPIError(
                f"Batch returned {len(responses)} responses for {len(operations)} operations"
            )

        for operation, response in zip(operations, responses, strict=True):
            if response.ok:
                result.succeeded.append(operation)
            else:
                result.failed.append(
                    BatchFailure(operation, status=response.status, message=response.message)
                )
        return result

    def _batch_request(self, operation: RecordOperation[PasswordRuleRecord]) -> BatchRequest:
        body = {"data": password_rule_record_body(operation.record)}
        match operation:
            case CreateRecord():
                return BatchRequest(
                    method="POST",
                    path=self._client.records_path(self._name),
                    body=body,
                )
            case UpdateRecord(record=PasswordRuleRecord(id=str(record_id))):
                return BatchRequest(
                    method="PUT",
                    path=self._client.records_path(self._name, record_id),
                    body=body,
                )
            case _:
                raise TypeError(f"Unsupported batch operation: {operation!r}")


def build_remote_settings_stores(
    config: RemoteSettingsConfig,
    *,
    client: RemoteSettingsClient | None = None,
) -> tuple[RelatedRealmsStore, PasswordRulesStore]:
    active_client = client or RemoteSettingsClient(config=config)
    return (
        RelatedRealmsCollection(active_client, config.related_realms_collection),
        PasswordRulesCollection(active_client, config.password_rules_collection),
    )
