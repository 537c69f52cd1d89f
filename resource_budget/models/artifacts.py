"""Audit inputs: collected artifacts and the per-run context."""

from __future__ import annotations

import pydantic

from resource_budget.config import AuditSettings
from resource_budget.models.network import NetworkRequest
from resource_budget.utils import serialization
from resource_budget.utils.cache import ComputedCache


class PageUrl(pydantic.BaseModel):
    """The URL the audit was started with and the one the page settled on."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    requested_url: str | None = None
    final_url: str | None = None


class Artifacts(pydantic.BaseModel):
    """Read-only snapshot of everything the audit needs from the page load."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    network_requests: tuple[NetworkRequest, ...] = ()
    url: PageUrl = pydantic.Field(default_factory=PageUrl)


class AuditContext(pydantic.BaseModel):
    """Settings plus the computed-artifact cache shared across audits."""

    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True)

    settings: AuditSettings = pydantic.Field(default_factory=AuditSettings)
    computed_cache: ComputedCache = pydantic.Field(default_factory=ComputedCache)
