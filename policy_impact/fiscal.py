"""
Fiscal Impact Aggregator

Scales a policy scenario up to national level, independent of any single
household:
- Tax revenue change (trillion yen) from fixed per-unit coefficients
- GDP, employment and consumption effects
- Four-year revenue timeline
- Alternative tax proposals to absorb a surplus or close a gap
- Regional breakdown across prefectures and a regional disparity index

Sign convention: positive revenue delta = more tax revenue for government.
"""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import List, Literal, Tuple

import numpy as np
import pandas as pd

from .data.regional import regional_dataframe
from .errors import InvalidScenarioError
from .policies import POLICY_COEFFICIENTS, PolicyKind, PolicyScenario, resolve_policy_kind
from .ripple import RippleEffect, compute_ripple_effect
from .scenarios import round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# National tax revenue, FY2024 (trillion yen)
CURRENT_TAX_REVENUE_TRILLIONS = 65.2

# Macro pass-through of a revenue change
GDP_PER_REVENUE = 0.8
JOBS_PER_TRILLION = 15_000
CONSUMPTION_PER_REVENUE = 1.2

# Revenue effect grows as the base expands after implementation
TIMELINE_GROWTH = (1.00, 1.05, 1.08, 1.10)
DEFAULT_START_YEAR = 2024

# Transfers (child support) have no ripple sector of their own
TRANSFER_SECTOR = "consumption"

TOP_REGION_COUNT = 10

Stance = Literal["relief", "consolidation"]


@dataclass(frozen=True)
class TaxRevenueImpact:
    """National revenue before/after the change (trillion yen)."""
    current_total: float
    impact_amount: float
    new_total: float
    impact_percentage: float

    def to_dict(self) -> dict:
        return {
            'currentTotal': self.current_total,
            'impactAmount': self.impact_amount,
            'newTotal': self.new_total,
            'impactPercentage': self.impact_percentage,
        }


@dataclass(frozen=True)
class EconomicImpact:
    """
    Macro effects of the revenue change.

    gdp_impact and consumption_impact are trillion yen; employment_impact
    is a head count.
    """
    gdp_impact: float
    employment_impact: int
    consumption_impact: float

    def to_dict(self) -> dict:
        return {
            'gdpImpact': self.gdp_impact,
            'employmentImpact': self.employment_impact,
            'consumptionImpact': self.consumption_impact,
        }


@dataclass(frozen=True)
class AlternativeTaxProposal:
    """
    One way to use a surplus (relief) or close a gap (consolidation).

    probability is a fixed political-feasibility score (0-100).
    """
    tax_type: str
    stance: Stance
    rate: str
    probability: int
    impact: str

    def to_dict(self) -> dict:
        return {
            'taxType': self.tax_type,
            'stance': self.stance,
            'rate': self.rate,
            'probability': self.probability,
            'impact': self.impact,
        }


@dataclass(frozen=True)
class RegionalImpact:
    """
    Share of the national change attributed to one prefecture.

    revenue_impact and economic_effect are trillion yen; change_rate is the
    economic effect as a percent of the region's share of current revenue.
    """
    name: str
    revenue_impact: float
    economic_effect: float
    change_rate: float

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'revenueImpact': self.revenue_impact,
            'impact': self.economic_effect,
            'changeRate': self.change_rate,
        }


@dataclass(frozen=True, eq=False)
class RegionalBreakdown:
    """Per-prefecture split of a national revenue change."""
    table: pd.DataFrame
    top_regions: Tuple[RegionalImpact, ...]
    disparity_before: float
    disparity_after: float

    @property
    def disparity_change(self) -> float:
        return self.disparity_after - self.disparity_before

    def to_dict(self) -> dict:
        return {
            'topRegions': [r.to_dict() for r in self.top_regions],
            'disparity': {
                'before': self.disparity_before,
                'after': self.disparity_after,
                'change': self.disparity_change,
            },
        }


@dataclass(frozen=True, eq=False)
class FiscalResult:
    """
    National-level results for one policy scenario.
    """
    policy_id: str
    rate_change: float
    tax_revenue: TaxRevenueImpact
    economic_impact: EconomicImpact
    ripple: RippleEffect

    # Revenue timeline
    years: np.ndarray
    timeline: np.ndarray  # Trillion yen per year

    alternative_taxes: Tuple[AlternativeTaxProposal, ...]
    regional: RegionalBreakdown

    @property
    def revenue_delta(self) -> float:
        return self.tax_revenue.impact_amount

    @property
    def cumulative_impact(self) -> float:
        """Total revenue change over the timeline."""
        return float(np.sum(self.timeline))

    def to_dataframe(self) -> pd.DataFrame:
        """Revenue timeline as a DataFrame."""
        return pd.DataFrame({
            'Year': self.years,
            'Revenue Impact (T yen)': self.timeline,
            'Growth Factor': np.array(TIMELINE_GROWTH[:len(self.years)]),
        })

    def to_dict(self) -> dict:
        return {
            'policyId': self.policy_id,
            'rateChange': self.rate_change,
            'taxRevenue': self.tax_revenue.to_dict(),
            'economicImpact': self.economic_impact.to_dict(),
            'ripple': self.ripple.to_dict(),
            'timeline': [
                {'year': int(year), 'impact': float(impact)}
                for year, impact in zip(self.years, self.timeline)
            ],
            'alternativeTaxes': [p.to_dict() for p in self.alternative_taxes],
            'regionalImpact': self.regional.to_dict(),
        }


# =============================================================================
# BUILDING BLOCKS
# =============================================================================

def calculate_revenue_delta(policy_id, rate_change: float) -> float:
    """
    National tax revenue change in trillion yen.

    Tax kinds move revenue in the direction of the rate change, except
    income tax, whose revenue estimate grows with the size of the change
    in either direction. Minimum wage and child support increases carry a
    negative coefficient (employer and government cost).
    """
    coefficients = POLICY_COEFFICIENTS[resolve_policy_kind(policy_id)]
    if coefficients.absolute_revenue:
        rate_change = abs(rate_change)
    return coefficients.revenue_coefficient * rate_change / coefficients.revenue_unit_scale


def calculate_economic_impact(revenue_delta: float) -> EconomicImpact:
    return EconomicImpact(
        gdp_impact=revenue_delta * GDP_PER_REVENUE,
        employment_impact=round_half_up(revenue_delta * JOBS_PER_TRILLION),
        consumption_impact=revenue_delta * CONSUMPTION_PER_REVENUE,
    )


def generate_revenue_timeline(revenue_delta: float,
                              start_year: int = DEFAULT_START_YEAR) -> Tuple[np.ndarray, np.ndarray]:
    """Years and compounded revenue impact for the four-year window."""
    years = np.arange(start_year, start_year + len(TIMELINE_GROWTH))
    impacts = revenue_delta * np.array(TIMELINE_GROWTH)
    return years, impacts


def generate_alternative_taxes(revenue_delta: float) -> List[AlternativeTaxProposal]:
    """
    Offsetting proposals, chosen by the sign of the revenue delta alone.

    A surplus (>= 0) funds tax cuts or spending; a gap (< 0) calls for tax
    increases or spending cuts. The list is never empty.
    """
    gap = abs(revenue_delta)

    if revenue_delta >= 0:
        amount = f"{gap:.1f}T yen"
        return [
            AlternativeTaxProposal(
                tax_type="income-tax cut",
                stance="relief",
                rate=f"Expand basic deduction by {round_half_up(revenue_delta * 50) * 10_000:,} yen",
                probability=65,
                impact=f"{amount} tax cut",
            ),
            AlternativeTaxProposal(
                tax_type="corporate-tax cut",
                stance="relief",
                rate=f"Cut rate by {revenue_delta * 0.8:.1f} points",
                probability=45,
                impact=f"{amount} tax cut",
            ),
            AlternativeTaxProposal(
                tax_type="social-security expansion",
                stance="relief",
                rate="Expand pension and medical benefits",
                probability=55,
                impact=f"{amount} spending increase",
            ),
        ]

    amount = f"{gap:.1f}T yen"
    return [
        AlternativeTaxProposal(
            tax_type="income-tax increase",
            stance="consolidation",
            rate=f"Raise top-bracket rates by {gap * 2:.1f} points",
            probability=70,
            impact=f"{amount} tax increase",
        ),
        AlternativeTaxProposal(
            tax_type="corporate-tax increase",
            stance="consolidation",
            rate=f"Raise rate by {gap * 1.5:.1f} points",
            probability=50,
            impact=f"{amount} tax increase",
        ),
        AlternativeTaxProposal(
            tax_type="consumption-tax increase",
            stance="consolidation",
            rate=f"Raise rate by {gap / 2.8:.1f} points",
            probability=85,
            impact=f"{amount} tax increase",
        ),
        AlternativeTaxProposal(
            tax_type="social-security cut",
            stance="consolidation",
            rate="Reduce pension and medical benefits",
            probability=40,
            impact=f"{amount} spending cut",
        ),
    ]


def _disparity_index(incomes: np.ndarray) -> float:
    """Highest regional income relative to the regional mean."""
    return float(np.max(incomes) / np.mean(incomes))


def calculate_regional_breakdown(
    revenue_delta: float,
    sector: str,
    current_revenue: float = CURRENT_TAX_REVENUE_TRILLIONS,
    top_n: int = TOP_REGION_COUNT,
) -> RegionalBreakdown:
    """
    Split a national revenue change across prefectures.

    Each prefecture's share is weighted by average income × consumption
    index. The regional revenue change is rippled through the policy's
    sector and scaled by the region's economic multiplier relative to the
    national mean.

    The disparity index (max / mean average income) is computed before
    the change and after scaling each region's income by the opposite of
    its change rate: more revenue collected means less household income.
    """
    df = regional_dataframe()

    weights = df['average_income'] * df['consumption_index']
    shares = weights / weights.sum()

    revenue_impact = revenue_delta * shares
    relative_multiplier = df['economic_multiplier'] / df['economic_multiplier'].mean()

    sign = 1 if revenue_delta >= 0 else -1
    rippled = compute_ripple_effect(np.abs(revenue_impact.to_numpy()), sector)
    economic_effect = rippled.total * sign * relative_multiplier.to_numpy()

    base_revenue = current_revenue * shares.to_numpy()
    change_rate = economic_effect / base_revenue * 100

    table = pd.DataFrame({
        'share': shares.to_numpy(),
        'revenue_impact': revenue_impact.to_numpy(),
        'economic_effect': economic_effect,
        'change_rate': change_rate,
    }, index=df.index)

    incomes = df['average_income'].to_numpy()
    incomes_after = incomes * (1 - change_rate / 100)

    ranked = table.reindex(table['economic_effect'].abs().sort_values(ascending=False).index)
    top_regions = tuple(
        RegionalImpact(
            name=name,
            revenue_impact=float(row['revenue_impact']),
            economic_effect=float(row['economic_effect']),
            change_rate=float(row['change_rate']),
        )
        for name, row in ranked.head(top_n).iterrows()
    )

    return RegionalBreakdown(
        table=table,
        top_regions=top_regions,
        disparity_before=_disparity_index(incomes),
        disparity_after=_disparity_index(incomes_after),
    )


# =============================================================================
# AGGREGATOR
# =============================================================================

class FiscalImpactAggregator:
    """
    National fiscal impact engine.

    Args:
        current_revenue_trillions: Baseline national tax revenue
        start_year: First year of the revenue timeline
        strict: Reject non-finite rate changes with InvalidScenarioError
    """

    def __init__(self, current_revenue_trillions: float = CURRENT_TAX_REVENUE_TRILLIONS,
                 start_year: int = DEFAULT_START_YEAR, strict: bool = True):
        self.current_revenue = current_revenue_trillions
        self.start_year = start_year
        self.strict = strict

    def calculate(self, policy_id, scenario: PolicyScenario) -> FiscalResult:
        """
        Calculate national-level effects of a scenario.

        Raises:
            UnknownPolicyError: If policy_id is not a supported policy
            InvalidScenarioError: In strict mode, for a non-finite rate change
                or a scenario written for another policy
        """
        kind = resolve_policy_kind(policy_id)
        rate_change = scenario.rate_change
        if not (isinstance(rate_change, numbers.Real) and math.isfinite(rate_change)):
            if self.strict:
                raise InvalidScenarioError(f"rate_change must be a finite number, got {rate_change!r}")
            logger.warning(f"Non-finite rate_change {rate_change!r} passed to {kind.value}; result will be NaN")
            if not isinstance(rate_change, numbers.Real):
                rate_change = math.nan

        if self.strict and resolve_policy_kind(scenario.policy_id) is not kind:
            raise InvalidScenarioError(
                f"Scenario is for {scenario.policy_id!r}, not {kind.value!r}"
            )

        revenue_delta = calculate_revenue_delta(kind, rate_change)
        sector = POLICY_COEFFICIENTS[kind].ripple_sector or TRANSFER_SECTOR

        sign = 1 if revenue_delta >= 0 else -1
        ripple = compute_ripple_effect(abs(revenue_delta), sector).scaled(sign)

        years, timeline = generate_revenue_timeline(revenue_delta, self.start_year)
        years.flags.writeable = False
        timeline.flags.writeable = False

        tax_revenue = TaxRevenueImpact(
            current_total=self.current_revenue,
            impact_amount=revenue_delta,
            new_total=self.current_revenue + revenue_delta,
            impact_percentage=revenue_delta / self.current_revenue * 100,
        )

        logger.info(
            f"{kind.value} {rate_change:+g}: revenue {revenue_delta:+.2f}T yen "
            f"({tax_revenue.impact_percentage:+.2f}%)"
        )

        return FiscalResult(
            policy_id=kind.value,
            rate_change=rate_change,
            tax_revenue=tax_revenue,
            economic_impact=calculate_economic_impact(revenue_delta),
            ripple=ripple,
            years=years,
            timeline=timeline,
            alternative_taxes=tuple(generate_alternative_taxes(revenue_delta)),
            regional=calculate_regional_breakdown(revenue_delta, sector, self.current_revenue),
        )


_default_aggregator = FiscalImpactAggregator()


def calculate_fiscal_impact(policy_id, scenario: PolicyScenario) -> FiscalResult:
    """Calculate national fiscal effects with the default aggregator."""
    return _default_aggregator.calculate(policy_id, scenario)
