"""Pydantic models for captured network requests and their resource types."""

from __future__ import annotations

import enum

import pydantic

from resource_budget.utils import serialization


class ResourceType(str, enum.Enum):
    """Coarse classification of a network request.

    Declaration order is the tie-break order used when report
    rows of equal size are sorted.
    """

    DOCUMENT = "document"
    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    IMAGE = "image"
    MEDIA = "media"
    FONT = "font"
    XHR = "xhr"
    OTHER = "other"

    @classmethod
    def normalize(cls, value: str | ResourceType | None) -> ResourceType:
        """Map a devtools-style type string onto the closed enum.

        Matching is case-insensitive.  ``Fetch`` counts as ``xhr``;
        anything unrecognised (``WebSocket``, ``Manifest``...) or
        missing falls into ``other``.
        """
        if isinstance(value, ResourceType):
            return value
        if not value:
            return cls.OTHER
        key = value.strip().lower()
        if key == "fetch":
            return cls.XHR
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER


class NetworkRequest(pydantic.BaseModel):
    """A finished network request as seen by the audit."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel,
        populate_by_name=True,
        frozen=True,
    )

    url: str
    resource_type: ResourceType = ResourceType.OTHER
    transfer_size: int = pydantic.Field(default=0, ge=0)

    @pydantic.field_validator("resource_type", mode="before")
    @classmethod
    def _normalize_resource_type(cls, value: object) -> ResourceType:
        if value is None or isinstance(value, (str, ResourceType)):
            return ResourceType.normalize(value)
        raise ValueError(f"resourceType must be a string, got {type(value).__name__}")


# Summary keys that aggregate across resource types.
TOTAL = "total"
THIRD_PARTY = "third-party"
