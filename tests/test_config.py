"""Tests for resource_budget.config — environment-driven settings."""

from __future__ import annotations

from unittest import mock

import pydantic
import pytest

from resource_budget.config import AuditSettings


class TestAuditSettings:
    """Tests for AuditSettings."""

    def test_defaults(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            settings = AuditSettings()
        assert settings.budgets is None
        assert settings.budget_path is None
        assert settings.third_party_match == "host"

    def test_reads_environment(self) -> None:
        env = {"RESOURCE_BUDGET_PATH": "/etc/budget.json", "THIRD_PARTY_MATCH": "root-domain"}
        with mock.patch.dict("os.environ", env, clear=True):
            settings = AuditSettings()
        assert settings.budget_path == "/etc/budget.json"
        assert settings.third_party_match == "root-domain"

    def test_budgets_from_json_env(self) -> None:
        env = {"BUDGETS": '[{"resourceSizes": [{"resourceType": "font", "budget": 10}]}]'}
        with mock.patch.dict("os.environ", env, clear=True):
            settings = AuditSettings()
        assert settings.budgets == [{"resourceSizes": [{"resourceType": "font", "budget": 10}]}]

    def test_invalid_match_mode(self) -> None:
        with mock.patch.dict("os.environ", {"THIRD_PARTY_MATCH": "suffix"}, clear=True):
            with pytest.raises(pydantic.ValidationError):
                AuditSettings()

    def test_init_by_field_name(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            settings = AuditSettings(budgets=[], third_party_match="root-domain")
        assert settings.budgets == []
        assert settings.third_party_match == "root-domain"
