"""
RandomAccess algorithm variants.

Constant-time distance and advancement built directly on ``distance_to`` and
``advanced_by``. No successor or predecessor is ever applied.
"""

from stepwise.constants.constants import CapabilityTier, Operation
from stepwise.dispatch.registry_base import algorithm


@algorithm(operation=Operation.DISTANCE, tier=CapabilityTier.RANDOM_ACCESS)
def direct_distance(start, end):
    return start.distance_to(end)


@algorithm(operation=Operation.ADVANCE, tier=CapabilityTier.RANDOM_ACCESS)
def direct_advance(start, n):
    return start.advanced_by(n)


@algorithm(operation=Operation.ADVANCE_BOUNDED, tier=CapabilityTier.RANDOM_ACCESS)
def clamped_advance(start, n, end):
    """
    Offset ``start`` by ``n``, clamping to ``end`` when ``end`` lies strictly
    between them in the direction of travel. O(1).

    ``end == start`` never clamps a non-zero ``n``: ``end`` is not ahead of
    ``start`` in either direction.
    """
    if n == 0:
        return start
    d = start.distance_to(end)
    if n < 0:
        if n < d < 0:
            return end
    elif 0 < d < n:
        return end
    return start.advanced_by(n)
