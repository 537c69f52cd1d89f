"""Shared serialization helpers for camelCase conversion.

Provides a single ``snake_to_camel`` implementation used by
Pydantic model configs for budget input and report output.
"""

from __future__ import annotations


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        name: A snake_case identifier such as
            ``"size_over_budget"``.

    Returns:
        The camelCase equivalent, e.g. ``"sizeOverBudget"``.
    """
    parts = name.split("_")
    return parts[0] + "".join(w.capitalize() for w in parts[1:])
