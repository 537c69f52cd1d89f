"""
Resource budget audit.

Compares a page's network usage per resource type against the
first budget set in ``settings.budgets``.

Without a budget the table lists the total, every resource type
that was requested (largest first), and the third-party
aggregate as the last row.  With a budget it lists only the
budgeted resource types, largest first, with the bytes and
request count by which each one exceeds its budget.
"""

from __future__ import annotations

from collections.abc import Sequence

import pydantic

from resource_budget import i18n
from resource_budget.analysis import resource_summary
from resource_budget.models import artifacts as artifacts_models
from resource_budget.models import report
from resource_budget.models.budget import Budget
from resource_budget.models.network import THIRD_PARTY, TOTAL, ResourceType
from resource_budget.utils import logger
from resource_budget.utils.errors import get_error_message

log = logger.create_logger("ResourceBudget")


# ── Budget selection ────────────────────────────────────────


def select_budget(budgets: Sequence[object] | None) -> Budget | None:
    """Validate and return the first budget set, or ``None``.

    Only the first entry is ever evaluated; later entries are
    ignored without validation.  A malformed first entry is
    logged and treated as no budget at all.
    """
    if not budgets:
        return None
    if not isinstance(budgets, (list, tuple)):
        log.warn("Budgets must be a list; ignoring", {"type": type(budgets).__name__})
        return None

    if len(budgets) > 1:
        log.debug("Only the first budget is evaluated", {"ignored": len(budgets) - 1})

    first = budgets[0]
    if isinstance(first, Budget):
        return first
    try:
        return Budget.model_validate(first)
    except pydantic.ValidationError as exc:
        log.warn("Invalid budget; reporting without budget", {"error": get_error_message(exc)})
        return None


# ── Table construction ──────────────────────────────────────


def headings(with_budget: bool) -> list[report.Heading]:
    """Column descriptors: three without a budget, five with one."""
    columns = [
        report.Heading(key="label", item_type="text", text=i18n.COLUMN_RESOURCE_TYPE),
        report.Heading(key="requestCount", item_type="numeric", text=i18n.COLUMN_REQUESTS),
        report.Heading(key="size", item_type="bytes", text=i18n.COLUMN_TRANSFER_SIZE),
    ]
    if with_budget:
        columns += [
            report.Heading(key="sizeOverBudget", item_type="bytes", text=i18n.COLUMN_SIZE_OVER_BUDGET),
            report.Heading(key="countOverBudget", item_type="text", text=i18n.COLUMN_COUNT_OVER_BUDGET),
        ]
    return columns


def _row(key: str, summary: resource_summary.ResourceSummary) -> report.ReportRow:
    entry = summary[key]
    return report.ReportRow(
        resource_type=key,
        label=i18n.row_label(key),
        request_count=entry.count,
        size=entry.size,
    )


def summary_rows(summary: resource_summary.ResourceSummary) -> list[report.ReportRow]:
    """Rows for the no-budget table.

    ``total`` first, then each requested resource type by
    descending size (ties keep ``ResourceType`` order), then
    ``third-party`` regardless of its size.
    """
    type_rows = [_row(t.value, summary) for t in ResourceType if summary[t.value].count > 0]
    type_rows.sort(key=lambda row: row.size, reverse=True)
    return [_row(TOTAL, summary), *type_rows, _row(THIRD_PARTY, summary)]


def budget_rows(budget: Budget, summary: resource_summary.ResourceSummary) -> list[report.ReportRow]:
    """Rows for the budget table, one per budgeted key, by descending size."""
    rows: list[report.ReportRow] = []
    for key in budget.targets():
        row = _row(key, summary)

        size_budget = budget.size_budget(key)
        if size_budget is not None and row.size > size_budget:
            row.size_over_budget = row.size - size_budget

        count_budget = budget.count_budget(key)
        if count_budget is not None and row.request_count > count_budget:
            row.count_over_budget = i18n.request_count(row.request_count - count_budget)

        rows.append(row)

    rows.sort(key=lambda row: row.size, reverse=True)
    return rows


# ── Public API ──────────────────────────────────────────────


def evaluate(
    audit_artifacts: artifacts_models.Artifacts,
    context: artifacts_models.AuditContext,
) -> report.AuditResult:
    """Build the resource budget report for *audit_artifacts*.

    Args:
        audit_artifacts: Network requests and page URLs.
        context: Settings (budgets, third-party matching) and
            the computed-artifact cache.

    Returns:
        AuditResult whose ``details`` holds the table.
    """
    summary = resource_summary.compute(audit_artifacts, context)
    budget = select_budget(context.settings.budgets)

    if budget is None:
        items = summary_rows(summary)
    else:
        items = budget_rows(budget, summary)
        over = [row.resource_type for row in items if row.size_over_budget or row.count_over_budget]
        if over:
            log.info("Budget exceeded", {"resource_types": over})
        else:
            log.success("All budgets met", {"rows": len(items)})

    total = summary[TOTAL]
    return report.AuditResult(
        title=i18n.TITLE,
        description=i18n.DESCRIPTION,
        display_value=i18n.display_value(total.count, total.size),
        details=report.ReportDetails(headings=headings(budget is not None), items=items),
    )


async def audit(
    audit_artifacts: artifacts_models.Artifacts,
    context: artifacts_models.AuditContext,
) -> report.AuditResult:
    """Async entry point matching the audit runner's calling convention."""
    return evaluate(audit_artifacts, context)
