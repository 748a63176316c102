"""
Steppable algorithm variants.

Linear-time distance and forward-only advancement, usable by any position with
a ``successor()``. Bidirectional positions reuse these for non-negative offsets
and for distance.
"""

from stepwise.constants.constants import (CapabilityTier, ERROR_NEGATIVE_ADVANCE,
                                          Operation)
from stepwise.core.capabilities import distance_type_of
from stepwise.core.exceptions import precondition
from stepwise.dispatch.registry_base import algorithm


@algorithm(operation=Operation.DISTANCE, tier=CapabilityTier.STEPPABLE)
def linear_distance(start, end):
    """
    Count ``successor`` applications from ``start`` until ``end``.

    O(N) where N is the result. ``end`` must be reachable from ``start``;
    if it is not, this never returns.
    """
    count = distance_type_of(type(start))(0)
    p = start
    while p != end:
        count += 1
        p = p.successor()
    return count


@algorithm(operation=Operation.ADVANCE, tier=CapabilityTier.STEPPABLE)
def advance_forward(start, n):
    """Apply ``successor`` exactly ``n`` times. Requires ``n >= 0``."""
    precondition(n >= 0, ERROR_NEGATIVE_ADVANCE.format(n, type(start).__name__))
    p = start
    for _ in range(n):
        p = p.successor()
    return p


@algorithm(operation=Operation.ADVANCE_BOUNDED, tier=CapabilityTier.STEPPABLE)
def advance_forward_bounded(start, n, end):
    """Step forward up to ``n`` times, stopping early at ``end``. Requires ``n >= 0``."""
    precondition(n >= 0, ERROR_NEGATIVE_ADVANCE.format(n, type(start).__name__))
    p = start
    remaining = n
    while remaining != 0 and p != end:
        p = p.successor()
        remaining -= 1
    return p
