"""
Regression tests for the policy catalog and preset handler.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from policy_impact.app_data import CALCULATION_FORMULAS, POLICY_CATALOG, POLICY_CATEGORIES
from policy_impact.errors import UnknownPolicyError
from policy_impact.policies import PolicyKind
from policy_impact.preset_handler import get_policy_entry, list_policies, scenario_from_preset


def test_catalog_covers_every_policy_kind():
    assert set(POLICY_CATALOG) == {kind.value for kind in PolicyKind}
    assert set(CALCULATION_FORMULAS) == set(POLICY_CATALOG)


def test_catalog_entries_are_complete():
    for policy_id, entry in POLICY_CATALOG.items():
        assert entry["id"] == policy_id
        assert entry["category"] in POLICY_CATEGORIES
        assert len(entry["scenarios"]) > 0
        assert len(entry["impact_flow"]) == 6


def test_list_policies_by_category():
    assert len(list_policies()) == 6
    assert {p["id"] for p in list_policies("tax")} == {
        "consumption-tax", "income-tax", "corporate-tax",
    }
    assert list_policies("defence") == []


def test_get_policy_entry_accepts_kind():
    assert get_policy_entry(PolicyKind.PENSION)["id"] == "pension"


def test_get_policy_entry_unknown():
    with pytest.raises(UnknownPolicyError):
        get_policy_entry("vat")


def test_scenario_from_preset():
    scenario = scenario_from_preset("consumption-tax", 1)

    assert scenario.policy_id == "consumption-tax"
    assert scenario.rate_change == 2
    assert scenario.new_rate == 12
    assert "12%" in scenario.label


def test_scenario_from_preset_default_index():
    assert scenario_from_preset("minimum-wage").rate_change == 98


def test_scenario_from_preset_bad_index():
    with pytest.raises(IndexError):
        scenario_from_preset("pension", 10)
