"""
Base registry for algorithm variants.

Each public operation (distance, advance, bounded advance) is backed by a small
closed set of variants, one per capability tier that needs its own algorithm.
Variants declare the operation and tier they implement with the ``algorithm``
decorator and land in ``ALGORITHM_REGISTRY``.

This module has no imports from the rest of the dispatch machinery so that the
algorithm modules can register themselves without circular dependencies.

Thread Safety:
    Registration and lookup go through a module lock.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

from stepwise.constants.constants import (CapabilityTier, Operation,
                                          VALID_OPERATIONS, VALID_TIERS)
from stepwise.core.exceptions import AlgorithmRegistrationError

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

_registry_lock = threading.Lock()

# Structure: {Operation: {CapabilityTier: variant}}
ALGORITHM_REGISTRY: Dict[Operation, Dict[CapabilityTier, Callable]] = {
    operation: {} for operation in Operation
}


def _coerce_operation(operation: Union[Operation, str]) -> Operation:
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        raise ValueError(
            f"Unsupported operation: {operation!r}. "
            f"Supported operations are: {', '.join(sorted(VALID_OPERATIONS))}"
        ) from None


def _coerce_tier(tier: Union[CapabilityTier, str]) -> CapabilityTier:
    if isinstance(tier, CapabilityTier):
        return tier
    try:
        return CapabilityTier(tier)
    except ValueError:
        raise ValueError(
            f"Unsupported capability tier: {tier!r}. "
            f"Supported tiers are: {', '.join(sorted(VALID_TIERS))}"
        ) from None


def register_algorithm(func: Callable, operation: Union[Operation, str],
                       tier: Union[CapabilityTier, str]) -> None:
    """
    Register ``func`` as the variant of ``operation`` for ``tier``.

    Args:
        func: The algorithm variant
        operation: The operation it implements
        tier: The capability tier it is specialised for

    Raises:
        ValueError: If operation or tier is not supported
        AlgorithmRegistrationError: If a different variant is already registered
    """
    operation = _coerce_operation(operation)
    tier = _coerce_tier(tier)

    with _registry_lock:
        existing = ALGORITHM_REGISTRY[operation].get(tier)
        if existing is func:
            logger.debug("Variant '%s' already registered for %s/%s",
                         func.__name__, operation.value, tier.value)
            return
        if existing is not None:
            raise AlgorithmRegistrationError(
                f"Cannot register '{func.__name__}' for {operation.value}/{tier.value}: "
                f"'{existing.__name__}' is already registered"
            )
        ALGORITHM_REGISTRY[operation][tier] = func

    # Tag the variant for easier inspection
    func.operation = operation
    func.capability_tier = tier
    logger.debug("Registered variant '%s' for %s/%s", func.__name__, operation.value, tier.value)


def unregister_algorithm(operation: Union[Operation, str], tier: Union[CapabilityTier, str]) -> Optional[Callable]:
    """Remove and return the variant registered for ``operation``/``tier``, if any."""
    operation = _coerce_operation(operation)
    tier = _coerce_tier(tier)
    with _registry_lock:
        return ALGORITHM_REGISTRY[operation].pop(tier, None)


def get_algorithm(operation: Union[Operation, str], tier: Union[CapabilityTier, str]) -> Optional[Callable]:
    """Return the variant registered exactly for ``operation``/``tier``, or None."""
    operation = _coerce_operation(operation)
    tier = _coerce_tier(tier)
    with _registry_lock:
        return ALGORITHM_REGISTRY[operation].get(tier)


def get_algorithms_by_tier(tier: Union[CapabilityTier, str]) -> List[Callable]:
    """
    Get all variants registered for a specific tier.

    Args:
        tier: The capability tier

    Returns:
        The variants specialised for ``tier``, in Operation order
    """
    tier = _coerce_tier(tier)
    with _registry_lock:
        return [
            variants[tier]
            for variants in ALGORITHM_REGISTRY.values()
            if tier in variants
        ]


def get_algorithm_info(func: Callable) -> Dict[str, Any]:
    """
    Get information about a registered variant.

    Raises:
        ValueError: If the function was never registered as a variant
    """
    if not hasattr(func, 'capability_tier'):
        raise ValueError(f"Function {func.__name__} is not a registered algorithm variant")

    return {
        'name': func.__name__,
        'operation': func.operation,
        'capability_tier': func.capability_tier,
        'doc': func.__doc__,
        'module': func.__module__
    }


def algorithm(*, operation: Union[Operation, str], tier: Union[CapabilityTier, str]) -> Callable[[F], F]:
    """
    Decorator that declares and registers the operation and tier a variant implements.

    Both are validated at decoration time, not at call time.

    Raises:
        ValueError: If operation or tier is missing or unsupported
    """
    if not operation:
        raise ValueError("operation must be explicitly declared")
    if not tier:
        raise ValueError("tier must be explicitly declared")

    operation = _coerce_operation(operation)
    tier = _coerce_tier(tier)

    def decorator(func: F) -> F:
        register_algorithm(func, operation, tier)
        return func

    return decorator
