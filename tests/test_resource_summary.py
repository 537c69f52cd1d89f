"""Tests for resource_budget.analysis.resource_summary — grouping and memoization."""

from __future__ import annotations

from resource_budget.analysis import resource_summary
from resource_budget.config import AuditSettings
from resource_budget.models import artifacts
from resource_budget.models.network import NetworkRequest, ResourceType


class TestSummarize:
    """Tests for summarize()."""

    def test_keys_and_order(self, network_requests) -> None:
        summary = resource_summary.summarize(network_requests, "example.com")
        assert list(summary) == ["total", *(t.value for t in ResourceType), "third-party"]

    def test_buckets(self, network_requests) -> None:
        summary = resource_summary.summarize(network_requests, "example.com")
        assert summary["total"] == resource_summary.ResourceCount(count=4, size=160)
        assert summary["script"] == resource_summary.ResourceCount(count=2, size=60)
        assert summary["document"].size == 30
        assert summary["image"].size == 70
        assert summary["font"] == resource_summary.ResourceCount()
        assert summary["third-party"] == resource_summary.ResourceCount(count=2, size=120)

    def test_every_request_in_one_type_bucket(self, network_requests) -> None:
        summary = resource_summary.summarize(network_requests, "example.com")
        assert sum(summary[t.value].count for t in ResourceType) == summary["total"].count
        assert sum(summary[t.value].size for t in ResourceType) == summary["total"].size

    def test_unknown_page_host(self, network_requests) -> None:
        summary = resource_summary.summarize(network_requests, None)
        assert summary["third-party"].count == 0

    def test_zero_byte_request_counts(self) -> None:
        requests = [NetworkRequest(url="https://a.com/x", resource_type="Media", transfer_size=0)]
        summary = resource_summary.summarize(requests, "a.com")
        assert summary["media"] == resource_summary.ResourceCount(count=1, size=0)


class TestCompute:
    """Tests for compute()."""

    def test_memoized_in_context_cache(self, page_artifacts) -> None:
        context = artifacts.AuditContext()
        first = resource_summary.compute(page_artifacts, context)
        second = resource_summary.compute(page_artifacts, context)
        assert first is second
        assert len(context.computed_cache) == 1

    def test_match_mode_is_part_of_key(self, page_artifacts) -> None:
        context = artifacts.AuditContext()
        resource_summary.compute(page_artifacts, context)
        other = artifacts.AuditContext(
            settings=AuditSettings(third_party_match="root-domain"),
            computed_cache=context.computed_cache,
        )
        resource_summary.compute(page_artifacts, other)
        assert len(context.computed_cache) == 2

    def test_separate_contexts_do_not_share(self, page_artifacts) -> None:
        a = artifacts.AuditContext()
        b = artifacts.AuditContext()
        resource_summary.compute(page_artifacts, a)
        assert len(b.computed_cache) == 0
