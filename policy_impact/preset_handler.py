"""
Preset policy handler.

Looks up catalog entries and turns preset scenarios into PolicyScenario
objects.
"""

from typing import List, Optional

from .app_data import POLICY_CATALOG
from .errors import UnknownPolicyError
from .policies import PolicyScenario, resolve_policy_kind


def list_policies(category: Optional[str] = None) -> List[dict]:
    """Catalog entries, optionally filtered to one category."""
    return [
        entry for entry in POLICY_CATALOG.values()
        if category is None or entry["category"] == category
    ]


def get_policy_entry(policy_id) -> dict:
    """
    Return the catalog entry for a policy.

    Raises:
        UnknownPolicyError: If policy_id is not in the catalog
    """
    kind = resolve_policy_kind(policy_id)
    try:
        return POLICY_CATALOG[kind.value]
    except KeyError:
        raise UnknownPolicyError(kind.value) from None


def scenario_from_preset(policy_id, index: int = 0) -> PolicyScenario:
    """
    Build a PolicyScenario from one of a policy's preset scenarios.

    Raises:
        UnknownPolicyError: If policy_id is not in the catalog
        IndexError: If the policy has no preset at index
    """
    entry = get_policy_entry(policy_id)
    preset = entry["scenarios"][index]
    return PolicyScenario(
        policy_id=entry["id"],
        rate_change=preset["change"],
        label=preset["label"],
    )
