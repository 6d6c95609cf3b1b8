"""
Household Policy Impact Calculator

Estimates the monthly impact of a policy change on one household.

Each policy kind has its own formula:
- Consumption tax: income-dependent consumption, scaled by region, family
  size and age, times the rate change
- Income tax / pension / corporate tax: linear in the rate change with a
  fixed per-point coefficient
- Minimum wage: wage delta over 160 monthly hours, scaled by the regional
  service-sector share
- Child support: the allowance change itself (a direct transfer)

Every formula except child support then runs through the ripple effect
calculator to split the impact into direct, indirect and induced effects.

Sign convention: positive = household is better off (yen/month).
"""

import logging
import math
import numbers
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from .data.regional import RegionalProfile, get_regional_profile
from .errors import InvalidScenarioError
from .policies import (
    POLICY_COEFFICIENTS,
    PolicyKind,
    PolicyScenario,
    UserParameters,
    get_age_multiplier,
    get_family_multiplier,
    resolve_policy_kind,
)
from .ripple import RippleEffect, compute_ripple_effect
from .scenarios import (
    Confidence,
    ScenarioOutcome,
    calculate_confidence,
    generate_scenarios,
    round_half_up,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MONTHLY_WORKING_HOURS = 160

# Share of income spent on consumption, by annual income (yen).
# Falls with income (higher saving rate at the top).
CONSUMPTION_RATE_BRACKETS: Tuple[Tuple[float, float], ...] = (
    (3_000_000, 0.85),
    (5_000_000, 0.75),
    (8_000_000, 0.65),
    (12_000_000, 0.55),
)
TOP_CONSUMPTION_RATE = 0.45


def get_consumption_rate(income: float) -> float:
    """Consumption share of income; a step function that never increases."""
    for threshold, rate in CONSUMPTION_RATE_BRACKETS:
        if income < threshold:
            return rate
    return TOP_CONSUMPTION_RATE


@dataclass(frozen=True)
class SimulationResult:
    """
    Decomposed monthly impact of one policy scenario on one household.

    All money fields are yen/month, positive = household better off.
    general_equilibrium_effect is the induced (re-spending) effect.
    """
    policy_id: str
    direct_effect: float
    indirect_effect: float
    general_equilibrium_effect: float
    total_impact: float
    confidence: Confidence
    scenarios: Tuple[ScenarioOutcome, ...]

    # Signed monthly impact before ripple decomposition
    initial_impact: float = 0.0
    ripple_sector: Optional[str] = None

    @property
    def monthly_impact(self):
        """Total impact rounded to whole yen."""
        return round_half_up(self.total_impact)

    @property
    def annual_impact(self) -> float:
        return self.total_impact * 12

    @property
    def breakdown(self) -> dict:
        return {
            'directEffect': self.direct_effect,
            'indirectEffect': self.indirect_effect,
            'generalEquilibriumEffect': self.general_equilibrium_effect,
        }

    def to_dict(self) -> dict:
        return {
            'policyId': self.policy_id,
            **self.breakdown,
            'totalImpact': self.total_impact,
            'confidence': self.confidence,
            'scenarios': [s.to_dict() for s in self.scenarios],
        }


@dataclass
class ScenarioComparison:
    """Results for several scenarios computed against the same household."""
    results: List[SimulationResult] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    @property
    def best(self) -> Optional[SimulationResult]:
        """Scenario most favourable to the household."""
        if not self.results:
            return None
        return max(self.results, key=lambda r: r.total_impact)

    @property
    def worst(self) -> Optional[SimulationResult]:
        if not self.results:
            return None
        return min(self.results, key=lambda r: r.total_impact)

    @property
    def spread(self) -> float:
        """Difference between the best and worst total impact."""
        if not self.results:
            return 0.0
        return self.best.total_impact - self.worst.total_impact

    def to_dict(self) -> dict:
        best, worst = self.best, self.worst
        return {
            'comparisons': [
                {'label': label, **result.to_dict()}
                for label, result in zip(self.labels, self.results)
            ],
            'analysis': {
                'best': self.labels[self.results.index(best)] if best else None,
                'worst': self.labels[self.results.index(worst)] if worst else None,
                'spread': self.spread,
            },
        }


class HouseholdImpactCalculator:
    """
    Household impact engine.

    Stateless apart from its settings, so one instance can serve any
    number of concurrent calls.

    Args:
        strict: Reject non-finite or mismatched scenario numbers with
            InvalidScenarioError. When False, NaN propagates through the
            arithmetic unchanged.
        monthly_hours: Working hours per month for the minimum-wage formula
    """

    def __init__(self, strict: bool = True, monthly_hours: float = MONTHLY_WORKING_HOURS):
        self.strict = strict
        self.monthly_hours = monthly_hours

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def calculate(self, policy_id, user: UserParameters,
                  scenario: PolicyScenario) -> SimulationResult:
        """
        Calculate the monthly impact of a scenario on a household.

        Raises:
            RegionNotFoundError: If user.region has no regional profile
            UnknownPolicyError: If policy_id is not a supported policy
            InvalidScenarioError: In strict mode, for unusable scenario numbers
        """
        kind = resolve_policy_kind(policy_id)
        scenario = self._check_scenario(kind, scenario)
        profile = get_regional_profile(user.region)

        if kind is PolicyKind.CONSUMPTION_TAX:
            result = self.consumption_tax_impact(user, scenario, profile)
        elif kind is PolicyKind.MINIMUM_WAGE:
            result = self.minimum_wage_impact(user, scenario, profile)
        elif kind is PolicyKind.CHILD_SUPPORT:
            result = self.child_support_impact(user, scenario)
        else:
            result = self.linear_rate_impact(kind, user, scenario)

        logger.info(
            f"{kind.value} {scenario.rate_change:+g} for {user.region}/{user.family_size}: "
            f"{result.total_impact:,.0f} yen/month ({result.confidence} confidence)"
        )
        return result

    def _check_scenario(self, kind: PolicyKind, scenario: PolicyScenario) -> PolicyScenario:
        """
        Validate scenario numbers; in lenient mode, return a copy with
        unusable numbers replaced by NaN.
        """
        numbers_to_check = [('rate_change', scenario.rate_change)]
        if scenario.base_rate is not None:
            numbers_to_check.append(('base_rate', scenario.base_rate))

        replacements = {}
        for name, value in numbers_to_check:
            usable = isinstance(value, numbers.Real) and math.isfinite(value)
            if usable:
                continue
            if self.strict:
                raise InvalidScenarioError(f"{name} must be a finite number, got {value!r}")
            logger.warning(f"Non-finite {name} {value!r} passed to {kind.value}; result will be NaN")
            if not isinstance(value, numbers.Real):
                replacements[name] = math.nan

        if self.strict and resolve_policy_kind(scenario.policy_id) is not kind:
            raise InvalidScenarioError(
                f"Scenario is for {scenario.policy_id!r}, not {kind.value!r}"
            )

        if replacements:
            return replace(scenario, **replacements)
        return scenario

    def _build_result(self, kind: PolicyKind, user: UserParameters, initial_impact: float,
                      sector: Optional[str], effects: RippleEffect) -> SimulationResult:
        return SimulationResult(
            policy_id=kind.value,
            direct_effect=effects.direct,
            indirect_effect=effects.indirect,
            general_equilibrium_effect=effects.induced,
            total_impact=effects.total,
            confidence=calculate_confidence(user.income, user.family_size),
            scenarios=tuple(generate_scenarios(effects.total)),
            initial_impact=initial_impact,
            ripple_sector=sector,
        )

    @staticmethod
    def _signed_ripple(impact: float, sector: str) -> RippleEffect:
        """Ripple the magnitude of impact, then reapply its sign."""
        sign = 1 if impact >= 0 else -1
        return compute_ripple_effect(abs(impact), sector).scaled(sign)

    # -------------------------------------------------------------------------
    # Policy formulas
    # -------------------------------------------------------------------------

    def consumption_tax_impact(self, user: UserParameters, scenario: PolicyScenario,
                               profile: RegionalProfile) -> SimulationResult:
        """
        Consumption tax: change in annual tax paid on adjusted consumption.

        adjusted = income × consumption_rate × economic_multiplier
                   × family × age × consumption_index
        burden = adjusted × (new_rate − base_rate) / 100
        """
        kind = PolicyKind.CONSUMPTION_TAX
        coefficients = POLICY_COEFFICIENTS[kind]
        sector = coefficients.ripple_sector

        # Default base rate comes from the kind being calculated, not the scenario's own
        base_rate = scenario.base_rate
        if base_rate is None:
            base_rate = coefficients.default_base_rate
        new_rate = base_rate + scenario.rate_change

        annual_consumption = user.income * get_consumption_rate(user.income)
        adjusted_consumption = (
            annual_consumption
            * profile.economic_multiplier
            * get_family_multiplier(user.family_size)
            * get_age_multiplier(user.age)
            * profile.consumption_index
        )
        logger.debug(
            f"Consumption for {user.region}: annual {annual_consumption:,.0f}, "
            f"adjusted {adjusted_consumption:,.0f}"
        )

        # Higher tax = higher burden = negative household impact
        annual_burden = adjusted_consumption * (new_rate - base_rate) / 100
        annual_impact = -annual_burden

        effects = self._signed_ripple(annual_impact, sector).scaled(1 / 12)
        return self._build_result(kind, user, annual_impact / 12, sector, effects)

    def linear_rate_impact(self, kind: PolicyKind, user: UserParameters,
                           scenario: PolicyScenario) -> SimulationResult:
        """
        Income tax, pension and corporate tax: coefficient × rate change.

        The coefficient is negative, so a rate increase lowers household income.
        """
        coefficients = POLICY_COEFFICIENTS[kind]
        if coefficients.household_coefficient is None:
            raise ValueError(f"{kind.value} has no linear household coefficient")

        monthly_impact = coefficients.household_coefficient * scenario.rate_change
        effects = self._signed_ripple(monthly_impact, coefficients.ripple_sector)
        return self._build_result(kind, user, monthly_impact, coefficients.ripple_sector, effects)

    def minimum_wage_impact(self, user: UserParameters, scenario: PolicyScenario,
                            profile: RegionalProfile) -> SimulationResult:
        """
        Minimum wage: hourly wage delta over a month of work, weighted by
        the region's service-sector share and economic multiplier.
        """
        kind = PolicyKind.MINIMUM_WAGE
        sector = POLICY_COEFFICIENTS[kind].ripple_sector

        current_wage = scenario.base_rate if scenario.base_rate is not None else profile.minimum_wage
        new_wage = current_wage + scenario.rate_change

        direct_monthly = (new_wage - current_wage) * self.monthly_hours
        adjusted = direct_monthly * profile.tertiary_ratio * profile.economic_multiplier

        effects = self._signed_ripple(adjusted, sector)
        return self._build_result(kind, user, adjusted, sector, effects)

    def child_support_impact(self, user: UserParameters,
                             scenario: PolicyScenario) -> SimulationResult:
        """Child support: the monthly allowance change, paid directly."""
        amount = scenario.rate_change
        effects = RippleEffect(direct=amount, indirect=0.0, induced=0.0, total=amount)
        return self._build_result(PolicyKind.CHILD_SUPPORT, user, amount, None, effects)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, user: UserParameters,
                scenarios: Sequence[PolicyScenario]) -> ScenarioComparison:
        """Calculate each scenario independently for the same household."""
        comparison = ScenarioComparison()
        for scenario in scenarios:
            comparison.results.append(self.calculate(scenario.policy_id, user, scenario))
            comparison.labels.append(scenario.label or f"{scenario.policy_id} {scenario.rate_change:+g}")
        return comparison


_default_calculator = HouseholdImpactCalculator()


def calculate_policy_impact(policy_id, user: UserParameters,
                            scenario: PolicyScenario) -> SimulationResult:
    """Calculate a household impact with the default (strict) calculator."""
    return _default_calculator.calculate(policy_id, user, scenario)


def compare_scenarios(user: UserParameters,
                      scenarios: Sequence[PolicyScenario]) -> ScenarioComparison:
    return _default_calculator.compare(user, scenarios)
