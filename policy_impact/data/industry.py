"""
Industry Ripple Multipliers

Input-output ripple coefficients by industry sector. Each sector splits a
unit of final demand into a direct effect (fixed at 1.0), an indirect effect
through supplier linkages, and an induced effect through re-spending of
household income.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

# Callers pass loosely-typed, policy-derived sector names; anything
# unrecognised resolves to this sector.
DEFAULT_SECTOR = "services"


@dataclass(frozen=True)
class SectorMultiplier:
    """
    Ripple coefficients for one industry sector.

    total_multiplier must equal direct + indirect + induced.
    """
    sector: str
    direct_effect: float
    indirect_effect: float
    induced_effect: float
    total_multiplier: float

    @property
    def component_sum(self) -> float:
        return self.direct_effect + self.indirect_effect + self.induced_effect


# Source: national input-output table ripple coefficients
SECTOR_MULTIPLIERS: Mapping[str, SectorMultiplier] = MappingProxyType({
    "consumption": SectorMultiplier(
        sector="final consumption",
        direct_effect=1.000,
        indirect_effect=0.425,
        induced_effect=0.312,
        total_multiplier=1.737,
    ),
    "manufacturing": SectorMultiplier(
        sector="manufacturing",
        direct_effect=1.000,
        indirect_effect=0.682,
        induced_effect=0.445,
        total_multiplier=2.127,
    ),
    "services": SectorMultiplier(
        sector="services",
        direct_effect=1.000,
        indirect_effect=0.358,
        induced_effect=0.298,
        total_multiplier=1.656,
    ),
    "construction": SectorMultiplier(
        sector="construction",
        direct_effect=1.000,
        indirect_effect=0.712,
        induced_effect=0.398,
        total_multiplier=2.110,
    ),
    "agriculture": SectorMultiplier(
        sector="agriculture, forestry and fisheries",
        direct_effect=1.000,
        indirect_effect=0.445,
        induced_effect=0.285,
        total_multiplier=1.730,
    ),
})


def lookup_sector(sector_key: str) -> SectorMultiplier:
    """
    Return the multiplier for a sector, falling back to DEFAULT_SECTOR.

    The fallback is logged as a data-quality signal, not raised.
    """
    multiplier = SECTOR_MULTIPLIERS.get(sector_key)
    if multiplier is None:
        logger.warning(
            f"Unknown industry sector {sector_key!r}; using {DEFAULT_SECTOR!r} multipliers"
        )
        return SECTOR_MULTIPLIERS[DEFAULT_SECTOR]
    return multiplier
