"""Source dataset configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import DEFAULT_TIMEOUT_SECONDS, RateLimit, ResilienceConfig

GITHUB_API_BASE_URL: Final[str] = "https://api.github.com"
GITHUB_RAW_MEDIA_TYPE: Final[str] = "application/vnd.github.v3.raw"
PMR_REPOSITORY: Final[str] = "apple/password-manager-resources"
RELATED_REALMS_PATH: Final[str] = "quirks/websites-with-shared-credential-backends.json"
PASSWORD_RULES_PATH: Final[str] = "quirks/password-rules.json"

GITHUB_TOKEN_ENV: Final[str] = "GITHUB_TOKEN"  # noqa: S105
LEGACY_RULES_ENV: Final[str] = "PMR_LEGACY_RULES_PATH"


@dataclass(frozen=True)
class SourceConfig:
    """Where the password-manager-resources quirks are read from."""

    resilience: ResilienceConfig
    repository: str = PMR_REPOSITORY
    related_realms_path: str = RELATED_REALMS_PATH
    password_rules_path: str = PASSWORD_RULES_PATH
    legacy_rules_path: Path | None = None

    def contents_url(self, path: str) -> str:
        return f"/repos/{self.repository}/contents/{path}"


def _validate_legacy_rules_path(value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_file():
        raise ConfigurationError(f"{LEGACY_RULES_ENV} does not point to a file: {path}")
    if path.stat().st_size == 0:
        raise ConfigurationError(f"{LEGACY_RULES_ENV} points to an empty file: {path}")
    return path.resolve()


def get_source_config(
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> SourceConfig:
    headers = {"Accept": GITHUB_RAW_MEDIA_TYPE}
    token = optional_env_var(GITHUB_TOKEN_ENV)
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"

    legacy_value = optional_env_var(LEGACY_RULES_ENV)
    legacy_path = _validate_legacy_rules_path(legacy_value) if legacy_value else None

    return SourceConfig(
        legacy_rules_path=legacy_path,
        resilience=ResilienceConfig(
            name="github",
            base_url=GITHUB_API_BASE_URL,
            timeout_seconds=timeout_seconds,
            ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
            default_headers=headers,
        ),
    )
