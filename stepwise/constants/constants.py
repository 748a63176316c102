"""
Consolidated constants for stepwise.

This module defines the capability tiers a position type can belong to, the
operations whose implementation is chosen per tier, and the shared message
templates used when a contract is violated.
"""

from enum import Enum
from typing import Dict, Tuple, Type


class CapabilityTier(Enum):
    STEPPABLE = "steppable"
    BIDIRECTIONAL = "bidirectional"
    RANDOM_ACCESS = "random_access"

    @property
    def refines(self) -> Tuple["CapabilityTier", ...]:
        """This tier followed by every tier it refines, most refined first."""
        index = TIER_SPECIFICITY.index(self)
        return TIER_SPECIFICITY[index:]

    def satisfies(self, other: "CapabilityTier") -> bool:
        """True if a position of this tier also provides ``other``'s contract."""
        return other in self.refines


class Operation(Enum):
    DISTANCE = "distance"
    ADVANCE = "advance"
    ADVANCE_BOUNDED = "advance_bounded"


# Most refined first; the resolver picks the first tier a type satisfies
TIER_SPECIFICITY: Tuple[CapabilityTier, ...] = (
    CapabilityTier.RANDOM_ACCESS,
    CapabilityTier.BIDIRECTIONAL,
    CapabilityTier.STEPPABLE,
)

VALID_OPERATIONS = {operation.value for operation in Operation}
VALID_TIERS = {tier.value for tier in CapabilityTier}

# Distance-related constants
DEFAULT_DISTANCE_TYPE: Type = int
DISTANCE_ATTRIBUTE = "Distance"

# Method names that make up each tier's contract, cumulative
TIER_METHODS: Dict[CapabilityTier, Tuple[str, ...]] = {
    CapabilityTier.STEPPABLE: ("successor",),
    CapabilityTier.BIDIRECTIONAL: ("successor", "predecessor"),
    CapabilityTier.RANDOM_ACCESS: ("successor", "predecessor", "distance_to", "advanced_by"),
}

# Error messages
ERROR_NEGATIVE_ADVANCE = (
    "Only Bidirectional positions can be advanced by a negative amount "
    "(got n={0} for {1})"
)
ERROR_NO_TIER = (
    "{0} is not a position type: it must provide at least 'successor' "
    "(Steppable), or subclass/register with one of the capability tiers"
)
ERROR_BACKWARD_STEP = (
    "{0} is a Steppable position and cannot step backward; "
    "Bidirectional or RandomAccess is required"
)
ERROR_POSITION_MISMATCH = (
    "Positions must share a type: start is {0}, end is {1}"
)
ERROR_DISTANCE_TYPE = (
    "Distance type {0} declared by {1} is not a signed integer type"
)
ERROR_OFFSET_TYPE = (
    "Offset must be an integer, got {0} ({1})"
)
