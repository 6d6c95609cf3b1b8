"""
Scenario and Confidence Generation

Turns a base monthly impact into an optimistic/base/pessimistic spread,
a post-implementation timeline, and sensitivity ranges, and classifies
how typical a household profile is (confidence label).
"""

import math
from dataclasses import dataclass, replace
from typing import Callable, List, Literal, Optional, Tuple

from .policies import PolicyKind, PolicyScenario, UserParameters, resolve_policy_kind

Confidence = Literal["high", "medium", "low"]


# =============================================================================
# CONSTANTS
# =============================================================================

# (name, impact factor, probability %); probabilities sum to 100
SCENARIO_SPREAD: Tuple[Tuple[str, float, int], ...] = (
    ("optimistic", 0.7, 30),
    ("base", 1.0, 50),
    ("pessimistic", 1.3, 20),
)

# Household adjustment after implementation (substitution, wage catch-up)
TIMELINE_DECAY: Tuple[Tuple[str, float], ...] = (
    ("immediate", 1.00),
    ("6 months", 0.85),
    ("1 year", 0.80),
    ("2 years", 0.75),
)

# Income band and family types treated as a "typical" household
HIGH_CONFIDENCE_INCOME = (3_000_000, 8_000_000)
MEDIUM_CONFIDENCE_INCOME = (2_000_000, 12_000_000)
HIGH_CONFIDENCE_FAMILIES = frozenset({"couple", "couple-1child", "couple-2children"})

RATE_SENSITIVITY = 0.15  # ±15% on rate_change
INCOME_SENSITIVITY = 0.10  # ±10% on household income

MODEL_ASSUMPTIONS = {
    PolicyKind.CONSUMPTION_TAX: [
        "Price pass-through: 100%",
        "Substitution effect: moderate",
        "Income effect: minor",
    ],
    PolicyKind.INCOME_TAX: [
        "Rate change applies to every bracket",
        "Take-home pay adjusts immediately",
        "Marginal propensity to consume follows the final-consumption ripple table",
    ],
    PolicyKind.PENSION: [
        "Premium change is split evenly between employee and employer",
        "Benefit expectations do not change saving behaviour",
    ],
    PolicyKind.MINIMUM_WAGE: [
        "160 working hours per month",
        "Effect scales with the regional service-sector share",
        "No employment reduction at the firm level",
    ],
    PolicyKind.CHILD_SUPPORT: [
        "Allowance is paid in full to the household",
        "No ripple decomposition; transfer is spent directly",
    ],
    PolicyKind.CORPORATE_TAX: [
        "Corporate burden is passed to workers through wages",
        "Investment response is not modelled",
    ],
}


@dataclass(frozen=True)
class ScenarioOutcome:
    """One point of the scenario spread (impact in yen/month)."""
    name: str
    impact: float
    probability: int

    def to_dict(self) -> dict:
        return {'name': self.name, 'impact': self.impact, 'probability': self.probability}


@dataclass(frozen=True)
class TimelinePoint:
    period: str
    impact: float

    def to_dict(self) -> dict:
        return {'period': self.period, 'impact': self.impact}


@dataclass(frozen=True)
class SensitivityResult:
    """Total monthly impact when one input is moved down/up."""
    parameter: str
    low_impact: float
    high_impact: float
    swing_percent: float

    @property
    def range(self) -> Tuple[float, float]:
        return (min(self.low_impact, self.high_impact), max(self.low_impact, self.high_impact))

    def to_dict(self) -> dict:
        return {
            'parameter': self.parameter,
            'lowImpact': self.low_impact,
            'highImpact': self.high_impact,
            'impact': f"±{self.swing_percent:.0f}%",
        }


def round_half_up(value: float):
    """
    Round to whole yen with halves rounded up (7.5 -> 8, -7.5 -> -7).

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def generate_scenarios(base_impact: float) -> List[ScenarioOutcome]:
    """Optimistic (×0.7, 30%), base (×1.0, 50%) and pessimistic (×1.3, 20%) outcomes."""
    return [
        ScenarioOutcome(name=name, impact=round_half_up(base_impact * factor), probability=prob)
        for name, factor, prob in SCENARIO_SPREAD
    ]


def calculate_confidence(income: float, family_size: str) -> Confidence:
    """
    Coarse reliability label based on how typical the household is.

    high: income in [3M, 8M] and a couple with at most two children
    medium: income in [2M, 12M]
    low: anything else
    """
    lo, hi = HIGH_CONFIDENCE_INCOME
    if lo <= income <= hi and family_size in HIGH_CONFIDENCE_FAMILIES:
        return "high"
    lo, hi = MEDIUM_CONFIDENCE_INCOME
    if lo <= income <= hi:
        return "medium"
    return "low"


def generate_timeline(monthly_impact: float) -> List[TimelinePoint]:
    return [
        TimelinePoint(period=period, impact=round_half_up(monthly_impact * factor))
        for period, factor in TIMELINE_DECAY
    ]


def model_assumptions(policy_id) -> List[str]:
    return list(MODEL_ASSUMPTIONS[resolve_policy_kind(policy_id)])


def _swing(low: float, high: float, base: float) -> float:
    if base == 0:
        return 0.0
    return abs(high - low) / 2 / abs(base) * 100


def calculate_sensitivity(
    user: UserParameters,
    scenario: PolicyScenario,
    calculate: Optional[Callable] = None,
) -> List[SensitivityResult]:
    """
    Re-run the household calculation with perturbed inputs.

    Args:
        user: Household profile
        scenario: Policy scenario
        calculate: (policy_id, user, scenario) -> SimulationResult;
            defaults to household.calculate_policy_impact

    Returns:
        One SensitivityResult for the rate change and one for income
    """
    if calculate is None:
        # Import here to avoid circular dependency
        from .household import calculate_policy_impact
        calculate = calculate_policy_impact

    policy_id = scenario.policy_id
    base = calculate(policy_id, user, scenario).total_impact

    def _with_rate(factor):
        perturbed = replace(scenario, rate_change=scenario.rate_change * factor)
        return calculate(policy_id, user, perturbed).total_impact

    def _with_income(factor):
        perturbed = replace(user, income=user.income * factor)
        return calculate(policy_id, perturbed, scenario).total_impact

    results = []
    for parameter, step, runner in [
        ("rate_change", RATE_SENSITIVITY, _with_rate),
        ("income", INCOME_SENSITIVITY, _with_income),
    ]:
        low = runner(1 - step)
        high = runner(1 + step)
        results.append(SensitivityResult(
            parameter=parameter,
            low_impact=low,
            high_impact=high,
            swing_percent=_swing(low, high, base),
        ))
    return results
