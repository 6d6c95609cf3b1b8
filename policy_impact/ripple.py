"""
Ripple Effect Calculator

Decomposes an initial economic impact into direct, indirect and induced
effects using the fixed input-output multipliers of an industry sector.
Both the household and the fiscal calculators propagate through here.
"""

from dataclasses import dataclass

from .data.industry import lookup_sector


@dataclass(frozen=True)
class RippleEffect:
    """Three-stage decomposition of an impact; total = direct + indirect + induced."""
    direct: float
    indirect: float
    induced: float
    total: float

    def scaled(self, factor: float) -> 'RippleEffect':
        """Return every component multiplied by factor (sign or unit conversion)."""
        return RippleEffect(
            direct=self.direct * factor,
            indirect=self.indirect * factor,
            induced=self.induced * factor,
            total=self.total * factor,
        )

    def to_dict(self) -> dict:
        return {
            'direct': self.direct,
            'indirect': self.indirect,
            'induced': self.induced,
            'total': self.total,
        }


def compute_ripple_effect(magnitude: float, sector_key: str) -> RippleEffect:
    """
    Decompose an initial impact through a sector's ripple multipliers.

    Operates on magnitudes: callers pass the absolute impact and reapply
    the sign. A negative magnitude passes its sign straight through, since
    every multiplier is positive.

    Args:
        magnitude: Initial impact (currency units)
        sector_key: Industry sector; unknown keys fall back to "services"

    Returns:
        RippleEffect with each component = magnitude × sector coefficient
    """
    multiplier = lookup_sector(sector_key)
    return RippleEffect(
        direct=magnitude * multiplier.direct_effect,
        indirect=magnitude * multiplier.indirect_effect,
        induced=magnitude * multiplier.induced_effect,
        total=magnitude * multiplier.total_multiplier,
    )
