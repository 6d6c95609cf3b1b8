"""
Policy and Household Parameter Definitions

Defines the six supported policy kinds, the coefficient set each kind
carries, and the immutable inputs to a calculation: the household profile
(UserParameters) and the proposed change (PolicyScenario).
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from .errors import UnknownPolicyError


class PolicyKind(Enum):
    """Supported policy families."""
    CONSUMPTION_TAX = "consumption-tax"
    INCOME_TAX = "income-tax"
    PENSION = "pension"
    MINIMUM_WAGE = "minimum-wage"
    CHILD_SUPPORT = "child-support"
    CORPORATE_TAX = "corporate-tax"


RateUnit = Literal["percentage_point", "currency_per_hour", "currency_per_month"]


@dataclass(frozen=True)
class PolicyCoefficients:
    """
    Fixed constants for one policy kind.

    Attributes:
        household_coefficient: Monthly household impact per unit of rate_change
            (yen/month). None when the kind has its own household formula.
        revenue_coefficient: National revenue change per revenue unit (trillion yen)
        revenue_unit_scale: rate_change is divided by this before applying
            revenue_coefficient (e.g. 100 yen/hour per unit for minimum wage)
        ripple_sector: Industry sector for economy-wide propagation
            (None = direct transfer, no ripple)
        rate_unit: What rate_change is measured in
        default_base_rate: Current statutory value, where the kind has one
        absolute_revenue: Revenue moves by the size of the change regardless
            of its direction
    """
    household_coefficient: Optional[float]
    revenue_coefficient: float
    revenue_unit_scale: float
    ripple_sector: Optional[str]
    rate_unit: RateUnit
    default_base_rate: Optional[float] = None
    absolute_revenue: bool = False


POLICY_COEFFICIENTS: Mapping[PolicyKind, PolicyCoefficients] = MappingProxyType({
    # Household: consumption-based formula. Revenue: ~2.8T yen per point
    PolicyKind.CONSUMPTION_TAX: PolicyCoefficients(
        household_coefficient=None,
        revenue_coefficient=2.8,
        revenue_unit_scale=1.0,
        ripple_sector="consumption",
        rate_unit="percentage_point",
        default_base_rate=10.0,
    ),
    # Applies across all brackets (5-45%), so no single base rate
    PolicyKind.INCOME_TAX: PolicyCoefficients(
        household_coefficient=-3800.0,
        revenue_coefficient=1.9,
        revenue_unit_scale=1.0,
        ripple_sector="consumption",
        rate_unit="percentage_point",
        absolute_revenue=True,
    ),
    # Employee + employer premium rate
    PolicyKind.PENSION: PolicyCoefficients(
        household_coefficient=-2100.0,
        revenue_coefficient=0.5,
        revenue_unit_scale=1.0,
        ripple_sector="consumption",
        rate_unit="percentage_point",
        default_base_rate=18.3,
    ),
    # Employer cost: ~0.3T yen per 100 yen/hour
    PolicyKind.MINIMUM_WAGE: PolicyCoefficients(
        household_coefficient=None,
        revenue_coefficient=-0.3,
        revenue_unit_scale=100.0,
        ripple_sector="services",
        rate_unit="currency_per_hour",
    ),
    # Government cost: ~0.8T yen per 10,000 yen/month per child
    PolicyKind.CHILD_SUPPORT: PolicyCoefficients(
        household_coefficient=None,
        revenue_coefficient=-0.8,
        revenue_unit_scale=10000.0,
        ripple_sector=None,
        rate_unit="currency_per_month",
        default_base_rate=15000.0,
    ),
    # Effective corporate rate
    PolicyKind.CORPORATE_TAX: PolicyCoefficients(
        household_coefficient=-1200.0,
        revenue_coefficient=1.2,
        revenue_unit_scale=1.0,
        ripple_sector="consumption",
        rate_unit="percentage_point",
        default_base_rate=23.2,
    ),
})


def resolve_policy_kind(policy_id) -> PolicyKind:
    """
    Map a policy id (or PolicyKind) to its PolicyKind.

    Raises:
        UnknownPolicyError: If the id is not a supported policy
    """
    if isinstance(policy_id, PolicyKind):
        return policy_id
    try:
        return PolicyKind(policy_id)
    except ValueError:
        raise UnknownPolicyError(str(policy_id)) from None


# =============================================================================
# HOUSEHOLD MULTIPLIERS
# =============================================================================

# Consumption scale relative to a single adult
FAMILY_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "single": 1.0,
    "couple": 1.6,
    "couple-1child": 2.2,
    "couple-2children": 2.8,
    "couple-3children": 3.4,
    "single-parent": 1.8,
})

FAMILY_SIZES = tuple(FAMILY_MULTIPLIERS)

# Consumption pattern by age band
AGE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "20-29": 0.95,
    "30-39": 1.05,
    "40-49": 1.15,
    "50-59": 1.10,
    "60+": 0.85,
})


def get_age_group(age: int) -> str:
    """Age band used for AGE_MULTIPLIERS; under-20s share the 20-29 band."""
    if age < 30:
        return "20-29"
    if age < 40:
        return "30-39"
    if age < 50:
        return "40-49"
    if age < 60:
        return "50-59"
    return "60+"


def get_family_multiplier(family_size: str) -> float:
    return FAMILY_MULTIPLIERS.get(family_size, 1.0)


def get_age_multiplier(age: int) -> float:
    return AGE_MULTIPLIERS.get(get_age_group(age), 1.0)


# =============================================================================
# CALCULATION INPUTS
# =============================================================================

@dataclass(frozen=True)
class UserParameters:
    """
    Household profile for a personal impact calculation.

    Attributes:
        income: Annual household income (yen/year)
        family_size: One of FAMILY_SIZES; unknown values count as "single"
        region: Prefecture name, must exist in the regional table
        age: Age of the household head
        occupation: Free-text occupation (informational)
        has_home_loan: Whether the household carries a mortgage (informational)
    """
    income: float
    family_size: str
    region: str
    age: int
    occupation: Optional[str] = None
    has_home_loan: bool = False


@dataclass(frozen=True)
class PolicyScenario:
    """
    A proposed change to one policy.

    rate_change is a signed delta whose unit depends on the policy kind:
    percentage points for the tax and pension kinds, yen/hour for the
    minimum wage, and yen/month for child support.
    """
    policy_id: str
    rate_change: float
    label: str = ""
    base_rate: Optional[float] = None

    @property
    def kind(self) -> PolicyKind:
        return resolve_policy_kind(self.policy_id)

    @property
    def coefficients(self) -> PolicyCoefficients:
        return POLICY_COEFFICIENTS[self.kind]

    @property
    def rate_unit(self) -> RateUnit:
        return self.coefficients.rate_unit

    @property
    def effective_base_rate(self) -> Optional[float]:
        """Explicit base rate, or the kind's current statutory value."""
        if self.base_rate is not None:
            return self.base_rate
        return self.coefficients.default_base_rate

    @property
    def new_rate(self) -> Optional[float]:
        base = self.effective_base_rate
        if base is None:
            return None
        return base + self.rate_change
