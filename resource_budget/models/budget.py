"""Pydantic models for budget.json budget sets.

A budget set caps transfer size (in KB) and request count per
resource type.  Keys follow the camelCase budget.json format:

.. code-block:: json

    [{"path": "/", "resourceSizes": [{"resourceType": "script", "budget": 125}],
      "resourceCounts": [{"resourceType": "third-party", "budget": 10}]}]
"""

from __future__ import annotations

import pydantic

from resource_budget.models.network import THIRD_PARTY, TOTAL, ResourceType
from resource_budget.utils import serialization

# Every key a budget may target.
BUDGET_TARGETS: tuple[str, ...] = (TOTAL, *(t.value for t in ResourceType), THIRD_PARTY)

KILOBYTE = 1024


class ResourceBudget(pydantic.BaseModel):
    """A single ceiling for one resource type (KB for sizes, requests for counts)."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    resource_type: str
    budget: float = pydantic.Field(ge=0, allow_inf_nan=False)

    @pydantic.field_validator("resource_type", mode="before")
    @classmethod
    def _normalize_resource_type(cls, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError("resourceType must be a string")
        key = value.strip().lower()
        if key not in BUDGET_TARGETS:
            raise ValueError(f"Invalid resource type: {value!r}. Valid types are: {', '.join(BUDGET_TARGETS)}")
        return key


class Budget(pydantic.BaseModel):
    """One budget set from a budget.json file."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    path: str | None = None
    resource_sizes: tuple[ResourceBudget, ...] = ()
    resource_counts: tuple[ResourceBudget, ...] = ()

    @pydantic.model_validator(mode="after")
    def _reject_duplicates(self) -> Budget:
        for field, entries in (("resourceSizes", self.resource_sizes), ("resourceCounts", self.resource_counts)):
            seen: set[str] = set()
            for entry in entries:
                if entry.resource_type in seen:
                    raise ValueError(f"{field} has duplicate entry of type '{entry.resource_type}'")
                seen.add(entry.resource_type)
        return self

    def size_budget(self, target: str) -> int | None:
        """Size budget for *target* in bytes, or ``None`` when unset."""
        for entry in self.resource_sizes:
            if entry.resource_type == target:
                return round(entry.budget * KILOBYTE)
        return None

    def count_budget(self, target: str) -> int | None:
        """Request-count budget for *target* (fractions floored), or ``None`` when unset."""
        for entry in self.resource_counts:
            if entry.resource_type == target:
                return int(entry.budget)
        return None

    def targets(self) -> list[str]:
        """Every budgeted key, sizes first, in first-mention order."""
        ordered: list[str] = []
        for entry in (*self.resource_sizes, *self.resource_counts):
            if entry.resource_type not in ordered:
                ordered.append(entry.resource_type)
        return ordered
