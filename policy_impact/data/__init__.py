"""
Static reference data for policy_impact.

This package provides read-only lookup tables for:
- Per-prefecture economic profiles (minimum wage, income, consumption, industry mix)
- Industry-sector input-output ripple multipliers

Example usage:
    >>> from policy_impact.data import lookup_regional_profile, lookup_sector
    >>> lookup_regional_profile("東京都").minimum_wage
    1113
    >>> lookup_sector("consumption").total_multiplier
    1.737
"""

from policy_impact.data.regional import (
    DEFAULT_MINIMUM_WAGE,
    PREFECTURES,
    REGIONAL_PROFILES,
    IndustryShares,
    RegionalProfile,
    get_minimum_wage,
    get_regional_profile,
    lookup_regional_profile,
    regional_dataframe,
)
from policy_impact.data.industry import (
    DEFAULT_SECTOR,
    SECTOR_MULTIPLIERS,
    SectorMultiplier,
    lookup_sector,
)
from policy_impact.data.validation import ReferenceDataValidator, ValidationResult

__all__ = [
    'DEFAULT_MINIMUM_WAGE',
    'PREFECTURES',
    'REGIONAL_PROFILES',
    'IndustryShares',
    'RegionalProfile',
    'get_minimum_wage',
    'get_regional_profile',
    'lookup_regional_profile',
    'regional_dataframe',
    'DEFAULT_SECTOR',
    'SECTOR_MULTIPLIERS',
    'SectorMultiplier',
    'lookup_sector',
    'ReferenceDataValidator',
    'ValidationResult',
]
