"""
Audit configuration.

Centralises environment variable names and default values for
the resource budget audit.  Uses ``pydantic_settings.BaseSettings``
for automatic environment variable binding, type coercion, and
validation.
"""

from __future__ import annotations

from typing import Any

import pydantic
import pydantic_settings

from resource_budget.utils import url


class AuditSettings(pydantic_settings.BaseSettings):
    """Settings read by the resource budget audit.

    Attributes:
        budgets: Raw budget sets as found in budget.json (or the
            ``BUDGETS`` env var as JSON).  Left unvalidated here;
            the audit validates the first entry and falls back to
            the no-budget report when it is malformed.
        budget_path: Optional path to a budget.json file used when
            no budgets are passed in directly.
        third_party_match: ``host`` classifies any host other than
            the page host as third-party; ``root-domain`` keeps
            subdomains of the page's registrable domain first-party.
    """

    model_config = pydantic_settings.SettingsConfigDict(populate_by_name=True)

    budgets: list[Any] | None = None
    budget_path: str | None = pydantic.Field(
        default=None, validation_alias="RESOURCE_BUDGET_PATH"
    )
    third_party_match: url.ThirdPartyMatch = pydantic.Field(
        default="host", validation_alias="THIRD_PARTY_MATCH"
    )
