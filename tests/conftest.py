from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from pmrsync.adapters.http_resilience import ResilientClient
from pmrsync.config import AppConfig, RemoteSettingsConfig, ResilienceConfig, SourceConfig

Handler = Callable[[httpx.Request], httpx.Response]


def make_client_factory(handler: Handler) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            base_url=resilience.base_url or "",
            headers=dict(resilience.default_headers or {}),
            auth=resilience.auth,
            transport=httpx.MockTransport(async_handler),
        )
        return client

    return factory


@pytest.fixture
def client_factory() -> Callable[[Handler], Callable[[ResilienceConfig], ResilientClient]]:
    return make_client_factory


@pytest.fixture
def source_config() -> SourceConfig:
    return SourceConfig(
        resilience=ResilienceConfig(
            name="github",
            base_url="https://api.github.test",
            default_headers={"Accept": "application/vnd.github.v3.raw"},
        )
    )


@pytest.fixture
def remote_settings_config() -> RemoteSettingsConfig:
    return RemoteSettingsConfig(
        server_url="https://remote-settings.test/v1",
        user="writer",
        password="secret",  # noqa: S106
        resilience=ResilienceConfig(
            name="remote-settings",
            base_url="https://remote-settings.test/v1",
            auth=httpx.BasicAuth("writer", "secret"),
        ),
    )


@pytest.fixture
def app_config(
    remote_settings_config: RemoteSettingsConfig,
    source_config: SourceConfig,
) -> AppConfig:
    return AppConfig(remote_settings=remote_settings_config, sources=source_config)


@pytest.fixture
def writer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FX_REMOTE_SETTINGS_WRITER_SERVER", "https://remote-settings.test/v1")
    monkeypatch.setenv("FX_REMOTE_SETTINGS_WRITER_USER", "writer")
    monkeypatch.setenv("FX_REMOTE_SETTINGS_WRITER_PASS", "secret")
    monkeypatch.delenv("FX_REMOTE_SETTINGS_BUCKET", raising=False)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("PMR_LEGACY_RULES_PATH", raising=False)
