"""HTTP client for the GitHub contents API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from pmrsync.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from pmrsync.config.http_resilience import ResilienceConfig
    from pmrsync.config.sources import SourceConfig

log = getLogger(__name__)


class SourcePayloadError(RuntimeError):
    """Raised when a source file does not have the expected JSON shape."""


class GitHubSourceClient:
    """Reads raw repository files through ``/repos/{owner}/{repo}/contents``."""

    def __init__(
        self,
        *,
        config: SourceConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    @property
    def config(self) -> SourceConfig:
        return self._config

    def fetch_json(self, path: str) -> object:
        return asyncio.run(self._fetch_json_async(path))

    async def _fetch_json_async(self, path: str) -> object:
        url = self._config.contents_url(path)
        log.info("Fetching %s from %s", path, self._config.repository)
        async with self._client_factory(self._resilience) as client:
            response = await client.get(url)
            response.raise_for_status()

        try:
            return response.json()
        except ValueError as exc:
            raise SourcePayloadError(f"Source file {path} is not valid JSON") from exc
