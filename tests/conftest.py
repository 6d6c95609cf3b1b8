"""
Pytest fixtures for policy impact tests.
"""

import pytest
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from policy_impact.policies import PolicyScenario, UserParameters
from policy_impact.household import HouseholdImpactCalculator
from policy_impact.fiscal import FiscalImpactAggregator


# =============================================================================
# HOUSEHOLD FIXTURES
# =============================================================================

@pytest.fixture
def tokyo_family():
    """Couple with two children in Tokyo, income 5M yen, head aged 35."""
    return UserParameters(
        income=5_000_000,
        family_size="couple-2children",
        region="東京都",
        age=35,
    )


@pytest.fixture
def rural_single():
    """Low-income single household in Okinawa."""
    return UserParameters(
        income=1_000_000,
        family_size="single",
        region="沖縄県",
        age=24,
    )


# =============================================================================
# SCENARIO FIXTURES
# =============================================================================

@pytest.fixture
def consumption_tax_increase():
    """Consumption tax 10% -> 12%."""
    return PolicyScenario(policy_id="consumption-tax", rate_change=2, label="12% (2pt increase)")


@pytest.fixture
def consumption_tax_cut():
    """Consumption tax 10% -> 8%."""
    return PolicyScenario(policy_id="consumption-tax", rate_change=-2, label="8% (2pt cut)")


@pytest.fixture
def income_tax_increase():
    return PolicyScenario(policy_id="income-tax", rate_change=2, label="All brackets +2pt")


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def calculator():
    """Strict household calculator."""
    return HouseholdImpactCalculator()


@pytest.fixture
def lenient_calculator():
    """Household calculator that lets NaN through."""
    return HouseholdImpactCalculator(strict=False)


@pytest.fixture
def aggregator():
    return FiscalImpactAggregator()
