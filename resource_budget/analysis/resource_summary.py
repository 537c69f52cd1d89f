"""
Per-resource-type summary of a page's network requests.

Groups requests into one bucket per ``ResourceType`` and adds
two aggregate buckets, ``total`` (every request) and
``third-party`` (requests served from another host than the
page).  The summary is memoized in the audit context's
``ComputedCache`` so that several audits over the same
artifacts share one computation.
"""

from __future__ import annotations

import collections
from collections.abc import Iterable, Mapping
from types import MappingProxyType

import pydantic

from resource_budget.models import artifacts as artifacts_models
from resource_budget.models.network import THIRD_PARTY, TOTAL, NetworkRequest, ResourceType
from resource_budget.utils import logger, url

log = logger.create_logger("ResourceSummary")

CACHE_NAME = "ResourceSummary"


class ResourceCount(pydantic.BaseModel):
    """Request count and summed transfer size of one bucket."""

    model_config = pydantic.ConfigDict(frozen=True)

    count: int = 0
    size: int = 0


ResourceSummary = Mapping[str, ResourceCount]


def summarize(
    requests: Iterable[NetworkRequest],
    page_host: str | None,
    match: url.ThirdPartyMatch = "host",
) -> ResourceSummary:
    """Build the summary for *requests* loaded by a page on *page_host*.

    Keys are ``total``, every ``ResourceType`` value in declaration
    order, then ``third-party``.  Types without requests are present
    with zero count and size.
    """
    counts: dict[str, int] = collections.defaultdict(int)
    sizes: dict[str, int] = collections.defaultdict(int)

    for request in requests:
        keys = [TOTAL, request.resource_type.value]
        if url.is_third_party(request.url, page_host, match):
            keys.append(THIRD_PARTY)
        for key in keys:
            counts[key] += 1
            sizes[key] += request.transfer_size

    ordered = [TOTAL, *(t.value for t in ResourceType), THIRD_PARTY]
    return MappingProxyType({key: ResourceCount(count=counts[key], size=sizes[key]) for key in ordered})


def _page_host(page_url: artifacts_models.PageUrl) -> str | None:
    """Host of the final URL, else of the requested URL."""
    host = url.extract_host(page_url.final_url)
    if host is None:
        host = url.extract_host(page_url.requested_url)
        if host is None:
            log.warn("No page URL available; classifying every request as first-party")
        else:
            log.warn("Final URL missing; using requested URL host", {"host": host})
    return host


def compute(
    audit_artifacts: artifacts_models.Artifacts,
    context: artifacts_models.AuditContext,
) -> ResourceSummary:
    """Return the (memoized) summary for *audit_artifacts*."""
    match = context.settings.third_party_match
    key = (audit_artifacts.network_requests, audit_artifacts.url, match)

    def _build() -> ResourceSummary:
        host = _page_host(audit_artifacts.url)
        summary = summarize(audit_artifacts.network_requests, host, match)
        log.debug(
            "Resource summary computed",
            {
                "requests": summary[TOTAL].count,
                "bytes": summary[TOTAL].size,
                "third_party": summary[THIRD_PARTY].count,
            },
        )
        return summary

    return context.computed_cache.get_or_compute(CACHE_NAME, key, _build)
