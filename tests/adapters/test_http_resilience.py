from __future__ import annotations

import asyncio
import dataclasses

import httpx

from pmrsync.adapters.http_resilience import ResilientClient
from pmrsync.config import RateLimit, ResilienceConfig


def test_client_applies_timeout_headers_and_auth() -> None:
    auth = httpx.BasicAuth("writer", "secret")
    config = ResilienceConfig(
        name="remote-settings",
        base_url="https://remote-settings.test/v1",
        timeout_seconds=5.0,
        default_headers={"Accept": "application/json"},
        auth=auth,
    )

    client = ResilientClient(config)
    inner = client._client  # noqa: SLF001  # type: ignore[reportPrivateUsage]

    assert inner.timeout == httpx.Timeout(5.0)
    assert inner.base_url == httpx.URL("https://remote-settings.test/v1/")
    assert inner.headers["Accept"] == "application/json"
    assert inner.auth is auth
    assert inner.event_hooks == {"request": [], "response": []}
    assert client._limiter is None  # noqa: SLF001  # type: ignore[reportPrivateUsage]
    asyncio.run(client.aclose())


def test_resilience_config_carries_only_transport_settings() -> None:
    names = {item.name for item in dataclasses.fields(ResilienceConfig)}

    assert names == {
        "name",
        "base_url",
        "timeout_seconds",
        "ratelimit",
        "default_headers",
        "auth",
    }


def test_rate_limit_builds_limiter() -> None:
    client = ResilientClient(ResilienceConfig(name="github", ratelimit=RateLimit(1, 1.0)))

    limiter = client._limiter  # noqa: SLF001  # type: ignore[reportPrivateUsage]
    assert limiter is not None
    assert limiter.max_rate == 1
    assert limiter.time_period == 1.0
    asyncio.run(client.aclose())
