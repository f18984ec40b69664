"""Public interface for the Remote Settings adapter."""

from __future__ import annotations

from .client import RemoteSettingsAPIError, RemoteSettingsClient
from .collections import (
    PasswordRulesCollection,
    RelatedRealmsCollection,
    build_remote_settings_stores,
)
from .schema import BatchRequest, BatchSubResponse

__all__ = [
    "BatchRequest",
    "BatchSubResponse",
    "PasswordRulesCollection",
    "RelatedRealmsCollection",
    "RemoteSettingsAPIError",
    "RemoteSettingsClient",
    "build_remote_settings_stores",
]
