from stepwise.constants.constants import (CapabilityTier, Operation,
                                          TIER_SPECIFICITY)

__all__ = [
    'CapabilityTier',
    'Operation',
    'TIER_SPECIFICITY',
]
