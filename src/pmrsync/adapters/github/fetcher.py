"""Source fetchers for the password-manager-resources quirks."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from pmrsync.domain.reconciliation import merge_password_rules

from .client import GitHubSourceClient, SourcePayloadError
from .schema import PasswordRulesPayload, RelatedRealmsPayload

if TYPE_CHECKING:
    from pathlib import Path

    from pmrsync.config.sources import SourceConfig
    from pmrsync.domain.ports import PasswordRulesFetcher, RelatedRealmsFetcher

log = getLogger(__name__)


@dataclass(slots=True)
class GitHubRelatedRealmsFetcher:
    client: GitHubSourceClient

    def __call__(self) -> list[list[str]]:
        path = self.client.config.related_realms_path
        payload = self.client.fetch_json(path)
        try:
            return RelatedRealmsPayload.model_validate(payload).root
        except ValidationError as exc:
            raise SourcePayloadError(f"Unexpected related realms payload in {path}") from exc


@dataclass(slots=True)
class GitHubPasswordRulesFetcher:
    client: GitHubSourceClient
    legacy_rules_path: Path | None = None

    def __call__(self) -> dict[str, str]:
        path = self.client.config.password_rules_path
        payload = self.client.fetch_json(path)
        try:
            rules = PasswordRulesPayload.model_validate(payload).as_rules()
        except ValidationError as exc:
            raise SourcePayloadError(f"Unexpected password rules payload in {path}") from exc

        if self.legacy_rules_path is None:
            return rules

        legacy = load_legacy_password_rules(self.legacy_rules_path)
        merged = merge_password_rules(rules, legacy)
        log.info(
            "Merged %s legacy password rules (%s not in source)",
            len(legacy),
            len(merged) - len(rules),
        )
        return merged


def load_legacy_password_rules(path: Path) -> dict[str, str]:
    """Read a local file shaped like ``password-rules.json``."""

    try:
        return PasswordRulesPayload.model_validate_json(path.read_bytes()).as_rules()
    except ValidationError as exc:
        raise SourcePayloadError(f"Unexpected legacy password rules payload in {path}") from exc


def build_github_fetchers(
    config: SourceConfig,
    *,
    client: GitHubSourceClient | None = None,
) -> tuple[RelatedRealmsFetcher, PasswordRulesFetcher]:
    active_client = client or GitHubSourceClient(config=config)
    return (
        GitHubRelatedRealmsFetcher(client=active_client),
        GitHubPasswordRulesFetcher(
            client=active_client,
            legacy_rules_path=config.legacy_rules_path,
        ),
    )
