"""
Regional Economic Profiles

Per-prefecture economic statistics used by the household and fiscal
calculators: 2024 minimum wage, average annual income, consumption index,
industry structure and the regional economic ripple multiplier.

The table is built once at import and exposed through a read-only mapping.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

import pandas as pd

from ..errors import RegionNotFoundError


# =============================================================================
# DEFAULTS
# =============================================================================

# Shown as the "current" minimum wage when the region is unknown.
# Never used inside a committed calculation.
DEFAULT_MINIMUM_WAGE = 900  # yen/hour


@dataclass(frozen=True)
class IndustryShares:
    """Share of regional output by industry, in percent (sums to 100)."""
    primary: float
    secondary: float
    tertiary: float

    @property
    def total(self) -> float:
        return self.primary + self.secondary + self.tertiary


@dataclass(frozen=True)
class RegionalProfile:
    """
    Static economic profile for one prefecture.

    Attributes:
        prefecture: Region key (prefecture name)
        minimum_wage: 2024 minimum wage (yen/hour)
        average_income: Average annual income (yen/year)
        consumption_index: Consumption level relative to the national average (1.0)
        industry_shares: Primary/secondary/tertiary output shares (percent)
        economic_multiplier: Regional economic ripple multiplier (>= 1.0)
        population_density: People per km²
    """
    prefecture: str
    minimum_wage: float
    average_income: float
    consumption_index: float
    industry_shares: IndustryShares
    economic_multiplier: float
    population_density: float

    @property
    def tertiary_ratio(self) -> float:
        """Service-sector share as a fraction (0-1)."""
        return self.industry_shares.tertiary / 100

    def to_dict(self) -> dict:
        return {
            'prefecture': self.prefecture,
            'minimumWage': self.minimum_wage,
            'averageIncome': self.average_income,
            'consumptionIndex': self.consumption_index,
            'industryShares': {
                'primary': self.industry_shares.primary,
                'secondary': self.industry_shares.secondary,
                'tertiary': self.industry_shares.tertiary,
            },
            'economicMultiplier': self.economic_multiplier,
            'populationDensity': self.population_density,
        }


def _profile(prefecture, minimum_wage, average_income, consumption_index,
             shares, economic_multiplier, population_density) -> RegionalProfile:
    return RegionalProfile(
        prefecture=prefecture,
        minimum_wage=minimum_wage,
        average_income=average_income,
        consumption_index=consumption_index,
        industry_shares=IndustryShares(*shares),
        economic_multiplier=economic_multiplier,
        population_density=population_density,
    )


# =============================================================================
# PREFECTURE TABLE
# =============================================================================

# Columns: prefecture, minimum wage (yen/h, FY2024), average income (yen/yr),
# consumption index, (primary, secondary, tertiary) %, ripple multiplier,
# population density (people/km²)
_PROFILES = [
    _profile("北海道", 960, 4_400_000, 0.92, (3.8, 18.2, 78.0), 1.85, 69),
    _profile("青森県", 898, 3_800_000, 0.88, (6.2, 20.1, 73.7), 1.72, 130),
    _profile("岩手県", 893, 3_900_000, 0.89, (5.8, 25.3, 68.9), 1.78, 84),
    _profile("宮城県", 883, 4_500_000, 0.95, (2.1, 22.4, 75.5), 1.92, 318),
    _profile("秋田県", 897, 3_700_000, 0.86, (5.9, 21.8, 72.3), 1.68, 84),
    _profile("山形県", 900, 4_000_000, 0.90, (4.8, 28.7, 66.5), 1.82, 119),
    _profile("福島県", 900, 4_200_000, 0.91, (4.2, 26.8, 69.0), 1.86, 137),
    _profile("茨城県", 911, 4_800_000, 0.98, (3.8, 32.1, 64.1), 1.95, 470),
    _profile("栃木県", 913, 4_700_000, 0.96, (3.2, 35.8, 61.0), 1.98, 306),
    _profile("群馬県", 935, 4_600_000, 0.94, (2.8, 34.2, 63.0), 1.94, 310),
    _profile("埼玉県", 987, 5_200_000, 1.05, (0.8, 26.4, 72.8), 2.08, 1_925),
    _profile("千葉県", 984, 5_100_000, 1.03, (1.5, 24.8, 73.7), 2.05, 1_218),
    _profile("東京都", 1113, 6_200_000, 1.15, (0.1, 8.2, 91.7), 2.35, 6_402),
    _profile("神奈川県", 1112, 5_500_000, 1.12, (0.4, 22.1, 77.5), 2.28, 3_807),
    _profile("新潟県", 931, 4_200_000, 0.92, (3.8, 26.2, 70.0), 1.88, 181),
    _profile("富山県", 948, 4_500_000, 0.94, (2.1, 35.8, 62.1), 1.92, 251),
    _profile("石川県", 933, 4_400_000, 0.93, (2.4, 29.8, 67.8), 1.89, 274),
    _profile("福井県", 931, 4_600_000, 0.95, (2.8, 32.1, 65.1), 1.91, 187),
    _profile("山梨県", 938, 4_300_000, 0.92, (4.2, 28.8, 67.0), 1.85, 186),
    _profile("長野県", 948, 4_500_000, 0.94, (3.8, 30.2, 66.0), 1.88, 154),
    _profile("岐阜県", 950, 4_600_000, 0.96, (2.1, 35.8, 62.1), 1.94, 190),
    _profile("静岡県", 984, 4_800_000, 0.98, (1.8, 35.2, 63.0), 2.02, 473),
    _profile("愛知県", 1027, 5_300_000, 1.05, (0.8, 38.2, 61.0), 2.15, 1_460),
    _profile("三重県", 973, 4_700_000, 0.97, (2.1, 35.8, 62.1), 1.96, 314),
    _profile("滋賀県", 967, 4_900_000, 1.00, (1.8, 35.2, 63.0), 2.01, 353),
    _profile("京都府", 1008, 5_000_000, 1.02, (1.2, 22.8, 76.0), 2.08, 560),
    _profile("大阪府", 1064, 5_200_000, 1.08, (0.2, 20.8, 79.0), 2.22, 4_630),
    _profile("兵庫県", 1001, 4_900_000, 1.01, (1.1, 26.9, 72.0), 2.05, 650),
    _profile("奈良県", 936, 4_700_000, 0.98, (1.8, 18.2, 80.0), 1.92, 365),
    _profile("和歌山県", 929, 4_200_000, 0.91, (3.2, 22.8, 74.0), 1.82, 204),
    _profile("鳥取県", 900, 3_800_000, 0.87, (4.8, 24.2, 71.0), 1.75, 160),
    _profile("島根県", 904, 3_900_000, 0.88, (5.2, 23.8, 71.0), 1.76, 103),
    _profile("岡山県", 932, 4_400_000, 0.93, (2.8, 28.2, 69.0), 1.89, 270),
    _profile("広島県", 970, 4_700_000, 0.97, (1.8, 28.2, 70.0), 1.98, 334),
    _profile("山口県", 928, 4_300_000, 0.92, (2.1, 32.9, 65.0), 1.88, 226),
    _profile("徳島県", 896, 4_000_000, 0.89, (3.8, 24.2, 72.0), 1.78, 184),
    _profile("香川県", 918, 4_200_000, 0.91, (2.8, 26.2, 71.0), 1.84, 515),
    _profile("愛媛県", 897, 4_100_000, 0.90, (3.2, 26.8, 70.0), 1.82, 243),
    _profile("高知県", 897, 3_900_000, 0.88, (4.8, 18.2, 77.0), 1.72, 102),
    _profile("福岡県", 941, 4_600_000, 0.96, (1.8, 20.2, 78.0), 2.02, 1_024),
    _profile("佐賀県", 900, 4_000_000, 0.89, (4.2, 26.8, 69.0), 1.78, 340),
    _profile("長崎県", 898, 3_900_000, 0.88, (3.8, 18.2, 78.0), 1.75, 329),
    _profile("熊本県", 898, 4_100_000, 0.90, (4.2, 22.8, 73.0), 1.82, 240),
    _profile("大分県", 899, 4_200_000, 0.91, (3.2, 28.8, 68.0), 1.85, 182),
    _profile("宮崎県", 897, 3_800_000, 0.87, (5.8, 19.2, 75.0), 1.72, 143),
    _profile("鹿児島県", 897, 3_800_000, 0.87, (5.2, 17.8, 77.0), 1.70, 178),
    _profile("沖縄県", 896, 3_600_000, 0.85, (2.1, 8.9, 89.0), 1.68, 645),
]

REGIONAL_PROFILES: Mapping[str, RegionalProfile] = MappingProxyType(
    {p.prefecture: p for p in _PROFILES}
)

PREFECTURES = tuple(REGIONAL_PROFILES)


def lookup_regional_profile(region: str) -> Optional[RegionalProfile]:
    """Return the profile for a region, or None when it is not in the table."""
    return REGIONAL_PROFILES.get(region)


def get_regional_profile(region: str) -> RegionalProfile:
    """
    Return the profile for a region.

    Raises:
        RegionNotFoundError: If the region has no profile
    """
    profile = REGIONAL_PROFILES.get(region)
    if profile is None:
        raise RegionNotFoundError(region)
    return profile


def get_minimum_wage(region: str) -> float:
    """Current minimum wage for display, falling back to DEFAULT_MINIMUM_WAGE."""
    profile = REGIONAL_PROFILES.get(region)
    if profile is None:
        return DEFAULT_MINIMUM_WAGE
    return profile.minimum_wage


def regional_dataframe() -> pd.DataFrame:
    """Regional table as a DataFrame indexed by prefecture."""
    rows = [
        {
            "prefecture": p.prefecture,
            "minimum_wage": p.minimum_wage,
            "average_income": p.average_income,
            "consumption_index": p.consumption_index,
            "primary_share": p.industry_shares.primary,
            "secondary_share": p.industry_shares.secondary,
            "tertiary_share": p.industry_shares.tertiary,
            "economic_multiplier": p.economic_multiplier,
            "population_density": p.population_density,
        }
        for p in REGIONAL_PROFILES.values()
    ]
    return pd.DataFrame(rows).set_index("prefecture")
