"""
Dispatch resolver for position types.

Given a concrete position type, the resolver determines its most refined
capability tier and selects, once, the algorithm variant each operation will
use for it. The selection is cached per type and per ``StepwiseConfig`` in a
``DispatchTable``; every later call for that type under the same config is a
single dictionary lookup with no tier tests.

Specificity order is strict: RandomAccess > Bidirectional > Steppable. A
RandomAccess type also satisfies the weaker tiers, but always gets its O(1)
variants. Where a tier has no variant of its own for an operation, the variant
of the nearest tier it refines is used (a Bidirectional type measures distance
with the Steppable scan).

Types that join a tier through ``ABC.register`` after being resolved need
``clear_dispatch_cache()`` to be re-resolved.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Type

import stepwise.algorithms  # noqa: F401  registers every variant
from stepwise.constants.constants import (CapabilityTier, ERROR_DISTANCE_TYPE,
                                          ERROR_NO_TIER, Operation)
from stepwise.core.capabilities import (Bidirectional, RandomAccess, Steppable,
                                        distance_type_of)
from stepwise.core.config import StepwiseConfig, get_current_config
from stepwise.core.exceptions import CapabilityError, DistanceTypeError
from stepwise.core.utils import is_signed_integer_type
from stepwise.dispatch.registry_base import get_algorithm

logger = logging.getLogger(__name__)

_TIER_INTERFACES = (
    (CapabilityTier.RANDOM_ACCESS, RandomAccess),
    (CapabilityTier.BIDIRECTIONAL, Bidirectional),
    (CapabilityTier.STEPPABLE, Steppable),
)

_dispatch_lock = threading.Lock()
_DISPATCH_CACHE: Dict[Tuple[type, StepwiseConfig], "DispatchTable"] = {}


@dataclass(frozen=True)
class DispatchTable:
    """The algorithm variants selected for one position type."""
    position_type: Type
    tier: CapabilityTier
    distance_type: Type
    distance: Callable
    advance: Callable
    advance_bounded: Callable

    def variant_for(self, operation: Operation) -> Callable:
        return getattr(self, operation.value)


def resolve_tier(position_type: type) -> CapabilityTier:
    """
    Return the most refined capability tier ``position_type`` satisfies.

    Raises:
        CapabilityError: If the type satisfies no tier at all
    """
    if not isinstance(position_type, type):
        raise CapabilityError(f"Expected a type, got {position_type!r}")
    for tier, interface in _TIER_INTERFACES:
        if issubclass(position_type, interface):
            return tier
    raise CapabilityError(ERROR_NO_TIER.format(position_type.__name__))


def _select_variant(operation: Operation, tier: CapabilityTier) -> Callable:
    for candidate in tier.refines:
        variant = get_algorithm(operation, candidate)
        if variant is not None:
            return variant
    raise CapabilityError(
        f"No {operation.value} variant is registered for tier '{tier.value}' "
        f"or any tier it refines"
    )


def _build_dispatch(position_type: type, config: StepwiseConfig) -> DispatchTable:
    tier = resolve_tier(position_type)
    distance_type = distance_type_of(position_type)

    if config.verify_distance_type and not is_signed_integer_type(distance_type):
        raise DistanceTypeError(
            ERROR_DISTANCE_TYPE.format(getattr(distance_type, '__name__', repr(distance_type)),
                                       position_type.__name__)
        )

    table = DispatchTable(
        position_type=position_type,
        tier=tier,
        distance_type=distance_type,
        distance=_select_variant(Operation.DISTANCE, tier),
        advance=_select_variant(Operation.ADVANCE, tier),
        advance_bounded=_select_variant(Operation.ADVANCE_BOUNDED, tier),
    )
    logger.log(
        config.dispatch_log_levelno,
        "Resolved %s as %s: distance=%s, advance=%s, advance_bounded=%s",
        position_type.__name__, tier.value, table.distance.__name__,
        table.advance.__name__, table.advance_bounded.__name__,
    )
    return table


def resolve_dispatch(position_type: type) -> DispatchTable:
    """
    Return the cached DispatchTable for ``position_type``, building it on first use.

    Tables are cached per current config, so a thread running with its own
    ``StepwiseConfig`` never sees a table built under another thread's settings.

    Raises:
        CapabilityError: If the type satisfies no capability tier
        DistanceTypeError: If the type's Distance is not a signed integer type
    """
    key = (position_type, get_current_config())
    table = _DISPATCH_CACHE.get(key)
    if table is not None:
        return table

    with _dispatch_lock:
        table = _DISPATCH_CACHE.get(key)
        if table is None:
            table = _build_dispatch(position_type, key[1])
            _DISPATCH_CACHE[key] = table
    return table


def clear_dispatch_cache() -> None:
    """Forget every resolved type; the next call re-resolves."""
    with _dispatch_lock:
        count = len(_DISPATCH_CACHE)
        _DISPATCH_CACHE.clear()
    logger.debug("Cleared %d cached dispatch table(s)", count)
