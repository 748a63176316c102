"""
Public API for stepwise.

``distance`` and ``advance`` work on any position type, whatever its capability
tier; the cheapest correct algorithm for the type is chosen once by the
resolver and reused on every call.
"""

import logging
import operator

from stepwise.constants.constants import (CapabilityTier, ERROR_OFFSET_TYPE,
                                          ERROR_POSITION_MISMATCH)
from stepwise.core.exceptions import DistanceTypeError, PositionTypeMismatchError
from stepwise.core.utils import is_integer_offset
from stepwise.dispatch.resolver import resolve_dispatch

logger = logging.getLogger(__name__)

# Marks an omitted ``end``; any position value, None included, is a real bound
_UNBOUNDED = object()


def _check_same_type(end, position_type: type) -> None:
    if not isinstance(end, position_type):
        raise PositionTypeMismatchError(
            ERROR_POSITION_MISMATCH.format(position_type.__name__, type(end).__name__)
        )


def _check_offset(n) -> None:
    if not is_integer_offset(n):
        raise DistanceTypeError(ERROR_OFFSET_TYPE.format(n, type(n).__name__))


def distance(start, end):
    """
    Measure the distance between ``start`` and ``end``.

    If the positions are RandomAccess, requires that they belong to the same
    sequence and runs in O(1). Otherwise requires that ``end`` is reachable
    from ``start`` by stepping forward, and runs in O(N) where N is the
    result; an unreachable ``end`` makes this loop forever.

    Returns:
        The step count, in the position type's Distance type

    Raises:
        CapabilityError: If ``start``'s type is not a position type
        PositionTypeMismatchError: If ``end`` is not of ``start``'s type
    """
    dispatch = resolve_dispatch(type(start))
    _check_same_type(end, dispatch.position_type)
    return dispatch.distance(start, end)


def advance(start, n, end=_UNBOUNDED):
    """
    Return ``start`` advanced by ``n`` positions, or until it equals ``end``.

    RandomAccess positions run in O(1); others in O(|n|). Unless the
    positions are at least Bidirectional, ``n`` must be non-negative.

    With ``end`` given, the result never passes ``end`` in the direction of
    travel: if ``end`` lies strictly between ``start`` and the requested
    offset, ``end`` is returned instead. ``n == 0`` always returns ``start``.

    Args:
        start: The starting position
        n: Signed step count
        end: Optional bound

    Raises:
        PreconditionViolation: If ``n < 0`` for a Steppable-only position, or a
            step leaves the position's domain
        DistanceTypeError: If ``n`` is not an integer
        PositionTypeMismatchError: If ``end`` is not of ``start``'s type
    """
    _check_offset(n)
    # Python int, so negating a numpy minimum cannot wrap around
    n = operator.index(n)
    dispatch = resolve_dispatch(type(start))
    if end is _UNBOUNDED:
        return dispatch.advance(start, n)
    _check_same_type(end, dispatch.position_type)
    return dispatch.advance_bounded(start, n, end)


def capability_tier(position) -> CapabilityTier:
    """The capability tier of ``position``'s type."""
    return resolve_dispatch(type(position)).tier
