"""Application orchestration entry points."""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from pmrsync.adapters.github import build_github_fetchers
from pmrsync.adapters.remote_settings import build_remote_settings_stores
from pmrsync.domain.data_integration import sync_password_rules, sync_related_realms

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pmrsync.config import AppConfig
    from pmrsync.domain.model import SyncResult
    from pmrsync.domain.ports import (
        PasswordRulesFetcher,
        PasswordRulesStore,
        RelatedRealmsFetcher,
        RelatedRealmsStore,
    )

log = getLogger(__name__)


class Pipeline(StrEnum):
    RELATED_REALMS = "related-realms"
    PASSWORD_RULES = "password-rules"


PIPELINE_ORDER: tuple[Pipeline, ...] = (Pipeline.RELATED_REALMS, Pipeline.PASSWORD_RULES)


def run_sync(
    config: AppConfig,
    *,
    pipelines: Iterable[Pipeline] = PIPELINE_ORDER,
    dry_run: bool = False,
    related_realms_fetcher: RelatedRealmsFetcher | None = None,
    password_rules_fetcher: PasswordRulesFetcher | None = None,
    related_realms_store: RelatedRealmsStore | None = None,
    password_rules_store: PasswordRulesStore | None = None,
) -> list[SyncResult]:
    """Run the selected pipelines one after another, related realms first.

    The first failure propagates and skips the pipelines after it; writes made
    by earlier pipelines stay in place.
    """

    selected = set(pipelines)
    if related_realms_fetcher is None or password_rules_fetcher is None:
        default_realms_fetcher, default_rules_fetcher = build_github_fetchers(config.sources)
        related_realms_fetcher = related_realms_fetcher or default_realms_fetcher
        password_rules_fetcher = password_rules_fetcher or default_rules_fetcher
    if related_realms_store is None or password_rules_store is None:
        default_realms_store, default_rules_store = build_remote_settings_stores(
            config.remote_settings
        )
        related_realms_store = related_realms_store or default_realms_store
        password_rules_store = password_rules_store or default_rules_store

    results: list[SyncResult] = []
    for pipeline in PIPELINE_ORDER:
        if pipeline not in selected:
            continue
        log.info("Starting %s sync (dry_run=%s)", pipeline, dry_run)
        if pipeline is Pipeline.RELATED_REALMS:
            result = sync_related_realms(
                fetcher=related_realms_fetcher,
                store=related_realms_store,
                dry_run=dry_run,
            )
        else:
            result = sync_password_rules(
                fetcher=password_rules_fetcher,
                store=password_rules_store,
                dry_run=dry_run,
            )
        log.info(
            f"Finished {pipeline} sync: created={result.created}, updated={result.updated}, "
            f"failed={result.failed}, review_requested={result.review_requested}"
        )
        results.append(result)

    return results
