"""
Consistency checks for the static reference tables.

Run at test time (and on demand) to confirm the regional and industry
tables satisfy the invariants the calculators rely on.
"""

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

import numpy as np
import pandas as pd

from .industry import SECTOR_MULTIPLIERS, DEFAULT_SECTOR, SectorMultiplier
from .regional import regional_dataframe

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check."""
    passed: bool
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        status = "✓ PASS" if self.passed else "✗ FAIL"
        return f"{status}: {self.message}"


class ReferenceDataValidator:
    """
    Validation checks for the regional and industry tables.

    Checks:
    - Sector totals equal the sum of direct, indirect and induced effects
    - Direct effect is the 1.0 anchor and the default sector exists
    - Regional industry shares sum to 100
    - Regional economic multipliers are at least 1.0
    """

    TOLERANCE = 1e-6
    SHARE_TOLERANCE = 0.05  # percentage points

    @classmethod
    def validate_sector_multipliers(
        cls, multipliers: Mapping[str, SectorMultiplier] = SECTOR_MULTIPLIERS
    ) -> ValidationResult:
        """Check that every sector's total equals the sum of its components."""
        issues = []

        if DEFAULT_SECTOR not in multipliers:
            issues.append(f"Default sector {DEFAULT_SECTOR!r} missing")

        for key, m in multipliers.items():
            if abs(m.total_multiplier - m.component_sum) > cls.TOLERANCE:
                issues.append(
                    f"{key}: total {m.total_multiplier} != component sum {m.component_sum:.6f}"
                )
            if m.direct_effect != 1.0:
                issues.append(f"{key}: direct effect {m.direct_effect} is not 1.0")
            if m.indirect_effect < 0 or m.induced_effect < 0:
                issues.append(f"{key}: negative ripple coefficient")

        if issues:
            return ValidationResult(
                passed=False,
                message=f"Sector multiplier table has {len(issues)} issue(s)",
                details={'issues': issues},
            )
        return ValidationResult(
            passed=True,
            message=f"All {len(multipliers)} sector multipliers are consistent",
        )

    @classmethod
    def validate_regional_profiles(cls, df: Optional[pd.DataFrame] = None) -> ValidationResult:
        """Check industry shares and multipliers across the regional table."""
        if df is None:
            df = regional_dataframe()

        if df.empty:
            return ValidationResult(passed=False, message="Regional table is empty")

        issues = []

        share_totals = df[['primary_share', 'secondary_share', 'tertiary_share']].sum(axis=1)
        bad_shares = share_totals[np.abs(share_totals - 100) > cls.SHARE_TOLERANCE]
        for prefecture, total in bad_shares.items():
            issues.append(f"{prefecture}: industry shares sum to {total:.2f}")

        low_multiplier = df[df['economic_multiplier'] < 1.0]
        for prefecture in low_multiplier.index:
            issues.append(f"{prefecture}: economic multiplier below 1.0")

        non_positive = df[(df['minimum_wage'] <= 0) | (df['average_income'] <= 0)]
        for prefecture in non_positive.index:
            issues.append(f"{prefecture}: non-positive wage or income")

        if issues:
            return ValidationResult(
                passed=False,
                message=f"Regional table has {len(issues)} issue(s)",
                details={'issues': issues},
            )
        return ValidationResult(
            passed=True,
            message=f"All {len(df)} regional profiles are consistent",
        )

    @classmethod
    def validate_all(cls) -> List[ValidationResult]:
        results = [
            cls.validate_sector_multipliers(),
            cls.validate_regional_profiles(),
        ]
        for result in results:
            if result.passed:
                logger.info(str(result))
            else:
                logger.warning(str(result))
        return results
