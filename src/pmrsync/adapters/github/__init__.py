"""Public interface for the GitHub source adapter."""

from __future__ import annotations

from .client import GitHubSourceClient, SourcePayloadError
from .fetcher import (
    GitHubPasswordRulesFetcher,
    GitHubRelatedRealmsFetcher,
    build_github_fetchers,
    load_legacy_password_rules,
)
from .schema import PasswordRuleEntry, PasswordRulesPayload, RelatedRealmsPayload

__all__ = [
    "GitHubPasswordRulesFetcher",
    "GitHubRelatedRealmsFetcher",
    "GitHubSourceClient",
    "PasswordRuleEntry",
    "PasswordRulesPayload",
    "RelatedRealmsPayload",
    "SourcePayloadError",
    "build_github_fetchers",
    "load_legacy_password_rules",
]
