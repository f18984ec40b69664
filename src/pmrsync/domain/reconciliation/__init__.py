"""Reconciliation core: decide which writes bring a collection in line with its source."""

from __future__ import annotations

from .equality import sequences_equal
from .password_rules import index_by_domain, merge_password_rules, plan_password_rule_operations
from .related_realms import (
    RelatedRealmsDecision,
    reconcile_related_realms,
    related_realms_stale,
    single_related_realms_record,
)

__all__ = [
    "RelatedRealmsDecision",
    "index_by_domain",
    "merge_password_rules",
    "plan_password_rule_operations",
    "reconcile_related_realms",
    "related_realms_stale",
    "sequences_equal",
    "single_related_realms_record",
]
