"""
Tests for the static reference tables and the ripple effect calculator.

Tests cover:
- Regional profile lookups and fallbacks
- Sector multiplier lookups and the services fallback
- Table consistency validation
- Ripple decomposition identity
"""

import logging
import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from policy_impact.data import (
    DEFAULT_MINIMUM_WAGE,
    PREFECTURES,
    REGIONAL_PROFILES,
    SECTOR_MULTIPLIERS,
    ReferenceDataValidator,
    get_minimum_wage,
    get_regional_profile,
    lookup_regional_profile,
    lookup_sector,
    regional_dataframe,
)
from policy_impact.errors import RegionNotFoundError
from policy_impact.ripple import RippleEffect, compute_ripple_effect


class TestRegionalProfiles:
    """Test prefecture lookups."""

    def test_tokyo_profile(self):
        """Tokyo carries the documented wage and multiplier."""
        tokyo = lookup_regional_profile("東京都")

        assert tokyo is not None
        assert tokyo.minimum_wage == 1113
        assert tokyo.economic_multiplier == 2.35
        assert tokyo.consumption_index == 1.15
        assert tokyo.average_income == 6_200_000

    def test_all_prefectures_present(self):
        """Test that all 47 prefectures are loaded."""
        assert len(PREFECTURES) == 47
        assert "北海道" in REGIONAL_PROFILES
        assert "沖縄県" in REGIONAL_PROFILES

    def test_unknown_region_lookup_returns_none(self):
        assert lookup_regional_profile("unknown") is None

    def test_unknown_region_get_raises(self):
        """Strict lookup raises a KeyError subclass naming the region."""
        with pytest.raises(RegionNotFoundError) as exc_info:
            get_regional_profile("unknown")

        assert exc_info.value.region == "unknown"
        assert isinstance(exc_info.value, KeyError)
        assert "unknown" in str(exc_info.value)

    def test_minimum_wage_display_fallback(self):
        """Display lookup falls back to the default wage instead of raising."""
        assert get_minimum_wage("東京都") == 1113
        assert get_minimum_wage("unknown") == DEFAULT_MINIMUM_WAGE == 900

    def test_tertiary_ratio(self):
        tokyo = get_regional_profile("東京都")
        assert tokyo.tertiary_ratio == pytest.approx(0.917)

    def test_profiles_are_immutable(self):
        """Test that the shared tables cannot be modified."""
        tokyo = get_regional_profile("東京都")

        with pytest.raises(FrozenInstanceError):
            tokyo.minimum_wage = 0
        with pytest.raises(TypeError):
            REGIONAL_PROFILES["東京都"] = tokyo

    def test_regional_dataframe(self):
        df = regional_dataframe()

        assert len(df) == 47
        assert df.loc["東京都", "minimum_wage"] == 1113
        assert {"average_income", "consumption_index", "economic_multiplier"} <= set(df.columns)

    def test_profile_to_dict(self):
        data = get_regional_profile("大阪府").to_dict()

        assert data["prefecture"] == "大阪府"
        assert data["minimumWage"] == 1064
        assert set(data["industryShares"]) == {"primary", "secondary", "tertiary"}


class TestSectorMultipliers:
    """Test industry sector lookups."""

    def test_consumption_sector(self):
        consumption = lookup_sector("consumption")

        assert consumption.direct_effect == 1.0
        assert consumption.indirect_effect == 0.425
        assert consumption.induced_effect == 0.312
        assert consumption.total_multiplier == 1.737

    def test_unknown_sector_falls_back_to_services(self, caplog):
        """Unknown sectors use services multipliers and log a warning."""
        with caplog.at_level(logging.WARNING):
            multiplier = lookup_sector("space-mining")

        assert multiplier is SECTOR_MULTIPLIERS["services"]
        assert "space-mining" in caplog.text

    def test_known_sector_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING):
            lookup_sector("manufacturing")

        assert caplog.text == ""


class TestValidation:
    """Test reference table validation."""

    def test_sector_table_consistent(self):
        result = ReferenceDataValidator.validate_sector_multipliers()
        assert result.passed, result.details

    def test_regional_table_consistent(self):
        result = ReferenceDataValidator.validate_regional_profiles()
        assert result.passed, result.details

    def test_bad_shares_detected(self):
        """A region whose shares miss 100 fails validation."""
        df = regional_dataframe()
        df.loc["東京都", "tertiary_share"] = 50.0

        result = ReferenceDataValidator.validate_regional_profiles(df)

        assert not result.passed
        assert any("東京都" in issue for issue in result.details["issues"])

    def test_bad_sector_total_detected(self):
        from policy_impact.data.industry import SectorMultiplier

        broken = dict(SECTOR_MULTIPLIERS)
        broken["consumption"] = SectorMultiplier(
            sector="consumption",
            direct_effect=1.0,
            indirect_effect=0.425,
            induced_effect=0.312,
            total_multiplier=2.0,
        )

        result = ReferenceDataValidator.validate_sector_multipliers(broken)
        assert not result.passed

    def test_validate_all(self):
        results = ReferenceDataValidator.validate_all()
        assert len(results) == 2
        assert all(r.passed for r in results)


class TestRippleEffect:
    """Test three-stage ripple decomposition."""

    @pytest.mark.parametrize("sector", list(SECTOR_MULTIPLIERS))
    def test_components_sum_to_total(self, sector):
        """direct + indirect + induced == total == magnitude x totalMultiplier."""
        magnitude = 12_345.6
        effect = compute_ripple_effect(magnitude, sector)

        assert effect.direct + effect.indirect + effect.induced == pytest.approx(effect.total)
        assert effect.total == pytest.approx(
            magnitude * SECTOR_MULTIPLIERS[sector].total_multiplier
        )

    def test_direct_equals_magnitude(self):
        effect = compute_ripple_effect(1000, "construction")
        assert effect.direct == 1000

    def test_negative_magnitude_propagates_sign(self):
        effect = compute_ripple_effect(-1000, "consumption")
        assert effect.total == pytest.approx(-1737)

    def test_scaled(self):
        effect = compute_ripple_effect(1200, "consumption").scaled(-1 / 12)

        assert effect.direct == pytest.approx(-100)
        assert effect.total == pytest.approx(-173.7)

    def test_array_magnitudes(self):
        """Arrays decompose elementwise."""
        effect = compute_ripple_effect(np.array([1.0, 2.0]), "services")
        np.testing.assert_allclose(effect.total, [1.656, 3.312])

    def test_to_dict(self):
        data = RippleEffect(1.0, 0.5, 0.25, 1.75).to_dict()
        assert data == {'direct': 1.0, 'indirect': 0.5, 'induced': 0.25, 'total': 1.75}
