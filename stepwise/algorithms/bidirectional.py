"""
Bidirectional algorithm variants.

Negative offsets walk backward through ``predecessor()``; non-negative offsets
defer to the Steppable variants. Distance has no Bidirectional variant: without
``distance_to`` the linear Steppable scan is the best available.
"""

from stepwise.algorithms.steppable import advance_forward, advance_forward_bounded
from stepwise.constants.constants import CapabilityTier, Operation
from stepwise.dispatch.registry_base import algorithm


@algorithm(operation=Operation.ADVANCE, tier=CapabilityTier.BIDIRECTIONAL)
def advance_bidirectional(start, n):
    """Apply ``successor`` ``n`` times, or ``predecessor`` ``-n`` times when ``n < 0``."""
    if n >= 0:
        return advance_forward(start, n)
    p = start
    for _ in range(-n):
        p = p.predecessor()
    return p


@algorithm(operation=Operation.ADVANCE_BOUNDED, tier=CapabilityTier.BIDIRECTIONAL)
def advance_bidirectional_bounded(start, n, end):
    """Step up to ``|n|`` times in the direction of ``n``, stopping early at ``end``."""
    if n >= 0:
        return advance_forward_bounded(start, n, end)
    p = start
    remaining = n
    while remaining != 0 and p != end:
        p = p.predecessor()
        remaining += 1
    return p
