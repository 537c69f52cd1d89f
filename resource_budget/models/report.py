"""Pydantic models for the resource budget report.

The report is a table (``headings`` + ``items``) handed to an
external renderer.  Serialize with ``model_dump(by_alias=True,
exclude_none=True)`` so that overage fields a row does not carry
are omitted rather than sent as ``null``.
"""

from __future__ import annotations

from typing import Literal

import pydantic

from resource_budget.utils import serialization

ItemType = Literal["text", "numeric", "bytes"]


class Heading(pydantic.BaseModel):
    """Column descriptor for the report table."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True, frozen=True
    )

    key: str
    item_type: ItemType
    text: str


class ReportRow(pydantic.BaseModel):
    """One row of the table: a resource type, ``total`` or ``third-party``."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    resource_type: str
    label: str
    request_count: int = 0
    size: int = 0
    size_over_budget: int | None = None
    count_over_budget: str | None = None


class ReportDetails(pydantic.BaseModel):
    """Table payload of an audit result."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    type: Literal["table"] = "table"
    headings: list[Heading] = pydantic.Field(default_factory=list)
    items: list[ReportRow] = pydantic.Field(default_factory=list)


class AuditResult(pydantic.BaseModel):
    """Complete output of the resource budget audit."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    id: str = "resource-budget"
    title: str
    description: str
    score: float | None = None
    score_display_mode: Literal["informative"] = "informative"
    display_value: str = ""
    details: ReportDetails
