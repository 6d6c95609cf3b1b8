"""
Japanese Policy Impact Engine

Estimates how tax, pension, minimum-wage and child-allowance changes
affect a single household (yen/month) and national finances
(trillion yen), using prefecture profiles and input-output ripple
multipliers.
"""

from .errors import (
    PolicyImpactError,
    RegionNotFoundError,
    InvalidScenarioError,
    UnknownPolicyError,
)
from .policies import (
    PolicyKind,
    PolicyCoefficients,
    POLICY_COEFFICIENTS,
    PolicyScenario,
    UserParameters,
)
from .data import (
    RegionalProfile,
    SectorMultiplier,
    lookup_regional_profile,
    lookup_sector,
)
from .ripple import RippleEffect, compute_ripple_effect
from .scenarios import (
    ScenarioOutcome,
    calculate_confidence,
    calculate_sensitivity,
    generate_scenarios,
    generate_timeline,
)
from .household import (
    HouseholdImpactCalculator,
    SimulationResult,
    ScenarioComparison,
    calculate_policy_impact,
    compare_scenarios,
)
from .fiscal import FiscalImpactAggregator, FiscalResult, calculate_fiscal_impact
from .preset_handler import list_policies, scenario_from_preset
from .reporting import ImpactReport, FiscalReport

__version__ = "1.0.0"
__all__ = [
    "PolicyImpactError",
    "RegionNotFoundError",
    "InvalidScenarioError",
    "UnknownPolicyError",
    "PolicyKind",
    "PolicyCoefficients",
    "POLICY_COEFFICIENTS",
    "PolicyScenario",
    "UserParameters",
    "RegionalProfile",
    "SectorMultiplier",
    "lookup_regional_profile",
    "lookup_sector",
    "RippleEffect",
    "compute_ripple_effect",
    "ScenarioOutcome",
    "calculate_confidence",
    "calculate_sensitivity",
    "generate_scenarios",
    "generate_timeline",
    "HouseholdImpactCalculator",
    "SimulationResult",
    "ScenarioComparison",
    "calculate_policy_impact",
    "compare_scenarios",
    "FiscalImpactAggregator",
    "FiscalResult",
    "calculate_fiscal_impact",
    "list_policies",
    "scenario_from_preset",
    "ImpactReport",
    "FiscalReport",
]
