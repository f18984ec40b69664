"""Pydantic models describing Kinto (Remote Settings) v1 payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BATCH_MAX_REQUESTS = 25


class KintoBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ServerSettings(KintoBaseModel):
    batch_max_requests: int = DEFAULT_BATCH_MAX_REQUESTS


class ServerInfo(KintoBaseModel):
    settings: ServerSettings = Field(default_factory=ServerSettings)


class ObjectResponse(KintoBaseModel):
    data: dict[str, object]


class ListResponse(KintoBaseModel):
    data: list[dict[str, object]]


class BatchRequest(KintoBaseModel):
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
    path: str
    body: dict[str, object] | None = None


class BatchSubResponse(KintoBaseModel):
    status: int
    path: str
    body: dict[str, object] | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def unconfirmed(cls, request: BatchRequest, message: str, status: int = 0) -> BatchSubResponse:
        """Stand-in for a sub-request whose outcome the server never reported."""
        return cls(status=status, path=request.path, body={"message": message})

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 400

    @property
    def message(self) -> str:
        if self.body is None:
            return ""
        message = self.body.get("message") or self.body.get("error") or ""
        return str(message)


class BatchResponse(KintoBaseModel):
    responses: list[BatchSubResponse]


class RecordPayload(KintoBaseModel):
    id: str | None = None
    last_modified: int | None = None


class RelatedRealmsRecordPayload(RecordPayload):
    related_realms: list[list[str]] = Field(alias="relatedRealms")


class PasswordRuleRecordPayload(RecordPayload):
    domain: str = Field(alias="Domain")
    rules: str = Field(alias="password-rules")
