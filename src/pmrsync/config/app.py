"""Aggregate configuration for one synchronisation run."""

from __future__ import annotations

from dataclasses import dataclass

from .remote_settings import RemoteSettingsConfig, get_remote_settings_config
from .sources import SourceConfig, get_source_config


@dataclass(frozen=True)
class AppConfig:
    remote_settings: RemoteSettingsConfig
    sources: SourceConfig


def get_app_config() -> AppConfig:
    """Load and validate every setting before any network call is made."""

    return AppConfig(
        remote_settings=get_remote_settings_config(),
        sources=get_source_config(),
    )
