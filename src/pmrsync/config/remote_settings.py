"""Remote Settings (Kinto) writer configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import httpx

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import DEFAULT_TIMEOUT_SECONDS, ResilienceConfig

DEFAULT_BUCKET: Final[str] = "main-workspace"
RELATED_REALMS_COLLECTION: Final[str] = "websites-with-shared-credential-backends"
PASSWORD_RULES_COLLECTION: Final[str] = "password-rules"

SERVER_ENV: Final[str] = "FX_REMOTE_SETTINGS_WRITER_SERVER"
USER_ENV: Final[str] = "FX_REMOTE_SETTINGS_WRITER_USER"
PASS_ENV: Final[str] = "FX_REMOTE_SETTINGS_WRITER_PASS"  # noqa: S105
BUCKET_ENV: Final[str] = "FX_REMOTE_SETTINGS_BUCKET"


@dataclass(frozen=True)
class RemoteSettingsConfig:
    """Holds the writer endpoint, credentials and collection names."""

    server_url: str
    user: str
    password: str
    resilience: ResilienceConfig
    bucket: str = DEFAULT_BUCKET
    related_realms_collection: str = RELATED_REALMS_COLLECTION
    password_rules_collection: str = PASSWORD_RULES_COLLECTION

    def __repr__(self) -> str:
        return (
            f"RemoteSettingsConfig(server_url={self.server_url!r}, user={self.user!r}, "
            f"bucket={self.bucket!r})"
        )


def _validate_server_url(value: str) -> str:
    url = value.strip()
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(f"{SERVER_ENV} must be an http(s) URL, got {url!r}")
    return url.rstrip("/")


def get_remote_settings_config(
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> RemoteSettingsConfig:
    values = require_env_vars((SERVER_ENV, USER_ENV, PASS_ENV))
    server_url = _validate_server_url(values[SERVER_ENV])
    user = values[USER_ENV]
    password = values[PASS_ENV]
    return RemoteSettingsConfig(
        server_url=server_url,
        user=user,
        password=password,
        bucket=optional_env_var(BUCKET_ENV) or DEFAULT_BUCKET,
        resilience=ResilienceConfig(
            name="remote-settings",
            base_url=server_url,
            timeout_seconds=timeout_seconds,
            auth=httpx.BasicAuth(user, password),
            default_headers={"Accept": "application/json"},
        ),
    )
