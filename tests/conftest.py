"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from resource_budget.models import artifacts
from resource_budget.models.network import NetworkRequest

# ── Artifact Factories ──────────────────────────────────────────


@pytest.fixture()
def network_requests() -> tuple[NetworkRequest, ...]:
    """One document, two scripts (one third-party) and a third-party image."""
    return (
        NetworkRequest(url="http://example.com/file.html", resource_type="Document", transfer_size=30),
        NetworkRequest(url="http://example.com/app.js", resource_type="Script", transfer_size=10),
        NetworkRequest(url="http://third-party.com/script.js", resource_type="Script", transfer_size=50),
        NetworkRequest(url="http://third-party.com/file.jpg", resource_type="Image", transfer_size=70),
    )


@pytest.fixture()
def page_artifacts(network_requests: tuple[NetworkRequest, ...]) -> artifacts.Artifacts:
    """Artifacts for a page on example.com."""
    return artifacts.Artifacts(
        network_requests=network_requests,
        url=artifacts.PageUrl(requested_url="http://example.com", final_url="http://example.com"),
    )


@pytest.fixture()
def script_image_budget() -> list[dict[str, object]]:
    """Zero script budgets, generous image budgets."""
    return [
        {
            "path": "/",
            "resourceSizes": [
                {"resourceType": "script", "budget": 0},
                {"resourceType": "image", "budget": 1000},
            ],
            "resourceCounts": [
                {"resourceType": "script", "budget": 0},
                {"resourceType": "image", "budget": 1000},
            ],
        }
    ]
