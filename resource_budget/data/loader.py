"""
Loader for budget.json files.

Reads the raw list of budget sets from disk.  Validation of the
budget contents happens in the audit, not here, so that a bad
entry degrades the report instead of failing the load.
"""

from __future__ import annotations

import json
import pathlib
from typing import Any

from resource_budget.utils import logger

log = logger.create_logger("BudgetLoader")


def load_budgets(path: str | pathlib.Path) -> list[Any]:
    """Load and parse a budget.json file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file contains invalid JSON.
        ValueError: If the top level is not a JSON array.
    """
    full_path = pathlib.Path(path)
    if not full_path.exists():
        raise FileNotFoundError(f"Budget file not found: {full_path}")
    with open(full_path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid JSON in {full_path}: {exc.msg}",
                exc.doc,
                exc.pos,
            ) from exc

    if not isinstance(raw, list):
        raise ValueError(f"Budget file {full_path} must contain an array of budgets")

    log.info("Loaded budgets", {"path": str(full_path), "count": len(raw)})
    return raw
