"""Tests for resource_budget.data.loader — budget.json loading."""

from __future__ import annotations

import json

import pytest

from resource_budget.data import loader


class TestLoadBudgets:
    """Tests for load_budgets()."""

    def test_loads_list(self, tmp_path) -> None:
        path = tmp_path / "budget.json"
        path.write_text(
            json.dumps([{"path": "/", "resourceSizes": [{"resourceType": "script", "budget": 125}]}]),
            encoding="utf-8",
        )
        budgets = loader.load_budgets(path)
        assert budgets[0]["resourceSizes"][0]["budget"] == 125

    def test_accepts_str_path(self, tmp_path) -> None:
        path = tmp_path / "budget.json"
        path.write_text("[]", encoding="utf-8")
        assert loader.load_budgets(str(path)) == []

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            loader.load_budgets(tmp_path / "nope.json")

    def test_invalid_json_names_file(self, tmp_path) -> None:
        path = tmp_path / "budget.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError, match="budget.json"):
            loader.load_budgets(path)

    def test_top_level_must_be_list(self, tmp_path) -> None:
        path = tmp_path / "budget.json"
        path.write_text('{"path": "/"}', encoding="utf-8")
        with pytest.raises(ValueError, match="array"):
            loader.load_budgets(path)
