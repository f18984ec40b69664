"""Application configuration helpers."""

from __future__ import annotations

from .app import AppConfig, get_app_config
from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .remote_settings import (
    DEFAULT_BUCKET,
    PASSWORD_RULES_COLLECTION,
    RELATED_REALMS_COLLECTION,
    RemoteSettingsConfig,
    get_remote_settings_config,
)
from .sources import SourceConfig, get_source_config

__all__ = [
    "DEFAULT_BUCKET",
    "PASSWORD_RULES_COLLECTION",
    "RELATED_REALMS_COLLECTION",
    "AppConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "RemoteSettingsConfig",
    "ResilienceConfig",
    "SourceConfig",
    "configure_logging",
    "get_app_config",
    "get_remote_settings_config",
    "get_source_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
