"""Pydantic models describing the password-manager-resources quirk files."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel


class RelatedRealmsPayload(RootModel[list[list[str]]]):
    """``websites-with-shared-credential-backends.json``: groups of equivalent realms."""


class PasswordRuleEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    password_rules: str = Field(alias="password-rules")


class PasswordRulesPayload(RootModel[dict[str, PasswordRuleEntry]]):
    """``password-rules.json``: a ``domain -> {"password-rules": ...}`` object."""

    def as_rules(self) -> dict[str, str]:
        return {domain: entry.password_rules for domain, entry in self.root.items()}
