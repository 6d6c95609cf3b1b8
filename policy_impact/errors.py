"""
Error types raised by the policy impact engine.

Only a missing region is a hard failure for a household calculation.
Unknown sectors, family sizes and age bands resolve to neutral defaults.
"""


class PolicyImpactError(Exception):
    """Base class for engine errors."""


class RegionNotFoundError(PolicyImpactError, KeyError):
    """Raised when a region key has no regional profile."""

    def __init__(self, region: str):
        self.region = region
        super().__init__(f"Regional data not found for {region!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvalidScenarioError(PolicyImpactError, ValueError):
    """Raised in strict mode when a scenario carries unusable numbers."""


class UnknownPolicyError(PolicyImpactError, ValueError):
    """Raised for a policy id outside the supported policy kinds."""

    def __init__(self, policy_id: str):
        self.policy_id = policy_id
        super().__init__(f"Unknown policy: {policy_id!r}")
