"""English display strings for the resource budget report."""

from __future__ import annotations

from resource_budget.models.network import THIRD_PARTY, TOTAL, ResourceType

TITLE = "Resource budget"
DESCRIPTION = (
    "Keep the quantity and size of network requests under the targets "
    "set by the provided resource budget."
)

COLUMN_RESOURCE_TYPE = "Resource Type"
COLUMN_REQUESTS = "Requests"
COLUMN_TRANSFER_SIZE = "Transfer Size"
COLUMN_SIZE_OVER_BUDGET = "Over Budget"
COLUMN_COUNT_OVER_BUDGET = "Requests Over Budget"

ROW_LABELS: dict[str, str] = {
    TOTAL: "Total",
    ResourceType.DOCUMENT.value: "Document",
    ResourceType.SCRIPT.value: "Script",
    ResourceType.STYLESHEET.value: "Stylesheet",
    ResourceType.IMAGE.value: "Image",
    ResourceType.MEDIA.value: "Media",
    ResourceType.FONT.value: "Font",
    ResourceType.XHR.value: "XHR",
    ResourceType.OTHER.value: "Other",
    THIRD_PARTY: "Third-party",
}


def row_label(key: str) -> str:
    """Display label for a summary key."""
    return ROW_LABELS[key]


def request_count(count: int) -> str:
    """``"1 request"`` / ``"N requests"``."""
    return "1 request" if count == 1 else f"{count} requests"


def format_kib(size: int) -> str:
    """Bytes as kibibytes with one decimal and thousands separators."""
    return f"{size / 1024:,.1f} KiB"


def display_value(count: int, size: int) -> str:
    """Summary shown next to the audit title."""
    return f"{request_count(count)} • {format_kib(size)}"
