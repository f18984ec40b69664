"""HTTP client for the Remote Settings (Kinto v1) writer API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from pmrsync.adapters.http_resilience import ResilientClient

from .schema import BatchResponse, BatchSubResponse, ListResponse, ObjectResponse, ServerInfo

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from pmrsync.config.http_resilience import ResilienceConfig
    from pmrsync.config.remote_settings import RemoteSettingsConfig

    from .schema import BatchRequest

log = getLogger(__name__)


class RemoteSettingsAPIError(RuntimeError):
    """Raised when the Remote Settings server returns an unexpected response."""


class RemoteSettingsClient:
    """Low-level record and metadata access for collections of one bucket."""

    def __init__(
        self,
        *,
        config: RemoteSettingsConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    @property
    def bucket(self) -> str:
        return self._config.bucket

    def collection_path(self, collection: str) -> str:
        return f"/buckets/{self._config.bucket}/collections/{collection}"

    def records_path(self, collection: str, record_id: str | None = None) -> str:
        path = f"{self.collection_path(collection)}/records"
        return f"{path}/{record_id}" if record_id is not None else path

    def list_records(self, collection: str) -> list[dict[str, object]]:
        return asyncio.run(self._list_records_async(collection))

    def create_record(self, collection: str, data: Mapping[str, object]) -> dict[str, object]:
        return asyncio.run(
            self._write_object_async("POST", self.records_path(collection), data)
        )

    def update_record(
        self,
        collection: str,
        record_id: str,
        data: Mapping[str, object],
    ) -> dict[str, object]:
        return asyncio.run(
            self._write_object_async("PUT", self.records_path(collection, record_id), data)
        )

    def get_collection_data(self, collection: str) -> dict[str, object]:
        return asyncio.run(self._get_object_async(self.collection_path(collection)))

    def patch_collection_data(
        self,
        collection: str,
        patch: Mapping[str, object],
    ) -> dict[str, object]:
        return asyncio.run(
            self._write_object_async("PATCH", self.collection_path(collection), patch)
        )

    def batch(self, requests: Sequence[BatchRequest]) -> list[BatchSubResponse]:
        """Submit ``requests`` through ``/batch``, split by the server's request limit.

        When a chunk fails, the chunks already confirmed are kept and every remaining
        request is reported as a failed sub-response instead of raising.
        """

        if not requests:
            return []
        return asyncio.run(self._batch_async(requests))

    async def _list_records_async(self, collection: str) -> list[dict[str, object]]:
        records: list[dict[str, object]] = []
        url: str | None = self.records_path(collection)
        async with self._client_factory(self._resilience) as client:
            while url is not None:
                response = await client.get(url)
                response.raise_for_status()
                records.extend(_validate(ListResponse, response).data)
                url = response.headers.get("Next-Page")
        return records

    async def _get_object_async(self, path: str) -> dict[str, object]:
        async with self._client_factory(self._resilience) as client:
            response = await client.get(path)
            response.raise_for_status()
        return _validate(ObjectResponse, response).data

    async def _write_object_async(
        self,
        method: str,
        path: str,
        data: Mapping[str, object],
    ) -> dict[str, object]:
        async with self._client_factory(self._resilience) as client:
            response = await client.request(method, path, json={"data": dict(data)})
            response.raise_for_status()
        return _validate(ObjectResponse, response).data

    async def _batch_async(self, requests: Sequence[BatchRequest]) -> list[BatchSubResponse]:
        responses: list[BatchSubResponse] = []
        async with self._client_factory(self._resilience) as client:
            info = await client.get("/")
            info.raise_for_status()
            chunk_size = max(1, _validate(ServerInfo, info).settings.batch_max_requests)

            for start in range(0, len(requests), chunk_size):
                chunk = requests[start : start + chunk_size]
                try:
                    responses.extend(await self._submit_chunk(client, chunk))
                except (httpx.HTTPError, RemoteSettingsAPIError) as exc:
                    # Earlier chunks are already applied; report the rest as unconfirmed.
                    log.warning(
                        "Batch chunk of %s requests failed after %s confirmed: %s",
                        len(chunk),
                        len(responses),
                        exc,
                    )
                    status = (
                        exc.response.status_code
                        if isinstance(exc, httpx.HTTPStatusError)
                        else 0
                    )
                    responses.extend(
                        BatchSubResponse.unconfirmed(request, str(exc), status) for request in chunk
                    )
                    responses.extend(
                        BatchSubResponse.unconfirmed(
                            request, "Not submitted after an earlier batch chunk failed"
                        )
                        for request in requests[start + chunk_size :]
                    )
                    break

        log.debug("Submitted %s batch requests in chunks of %s", len(requests), chunk_size)
        return responses

    @staticmethod
    async def _submit_chunk(
        client: ResilientClient,
        chunk: Sequence[BatchRequest],
    ) -> list[BatchSubResponse]:
        body = {"requests": [request.model_dump(exclude_none=True) for request in chunk]}
        response = await client.post("/batch", json=body)
        response.raise_for_status()
        chunk_responses = _validate(BatchResponse, response).responses
        if len(chunk_responses) != len(chunk):
            raise RemoteSettingsAPIError(
                f"Batch returned {len(chunk_responses)} responses for {len(chunk)} requests"
            )
        return chunk_responses



def _validate[TModel: (ListResponse, ObjectResponse, BatchResponse, ServerInfo)](
    model: type[TModel],
    response: httpx.Response,
) -> TModel:
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise RemoteSettingsAPIError(
            f"Unexpected Remote Settings response from {response.request.url}"
        ) from exc
