"""
Axiom checks for conforming position types.

The generic algorithms assume each tier's axioms hold and never verify them.
These helpers let the author of a position type test that assumption on sample
values. Checks whose operations are undefined at the sample (a step outside
the domain raising PreconditionViolation) are skipped, since the axioms only
bind where both sides are defined.
"""

import logging
from typing import Callable, Iterable, List, Tuple

from stepwise.api import _UNBOUNDED, advance, capability_tier, distance
from stepwise.constants.constants import CapabilityTier
from stepwise.core.exceptions import AxiomViolationError, PreconditionViolation

logger = logging.getLogger(__name__)

DEFAULT_OFFSETS: Tuple[int, ...] = (-3, -1, 0, 1, 2, 5)
DEFAULT_MAX_STEPS = 10_000

# Axiom names
SUCCESSOR_DETERMINISTIC = "successor_deterministic"
END_REACHABLE = "end_reachable"
DISTANCE_COUNTS_STEPS = "distance_counts_steps"
ADVANCE_REACHES_END = "advance_reaches_end"
PREDECESSOR_INVERTS_SUCCESSOR = "predecessor_inverts_successor"
SUCCESSOR_INVERTS_PREDECESSOR = "successor_inverts_predecessor"
ADVANCED_BY_ZERO = "advanced_by_zero"
ADVANCED_BY_ONE = "advanced_by_one"
ADVANCED_BY_MINUS_ONE = "advanced_by_minus_one"
DISTANCE_TO_SUCCESSOR = "distance_to_successor"
DISTANCE_TO_PREDECESSOR = "distance_to_predecessor"
DISTANCE_INVERTS_ADVANCE = "distance_inverts_advance"
ADVANCE_INVERTS_DISTANCE = "advance_inverts_distance"


class AxiomViolation:
    """A single axiom that failed at a sample position."""

    def __init__(self, axiom: str, message: str, position=None):
        self.axiom = axiom
        self.message = message
        self.position = position

    def __repr__(self) -> str:
        return f"AxiomViolation({self.axiom!r}, {self.message!r})"

    def __str__(self) -> str:
        return f"{self.axiom}: {self.message}"


def _attempt(operation: Callable):
    """Run ``operation``; report (False, None) if it is undefined at the sample."""
    try:
        return True, operation()
    except PreconditionViolation:
        return False, None


def check_steppable(x, end=_UNBOUNDED, max_steps: int = DEFAULT_MAX_STEPS) -> List[AxiomViolation]:
    """
    Check Steppable axioms at ``x``.

    ``successor`` must be deterministic. If ``end`` is given it must be
    reachable within ``max_steps`` successor applications, and ``distance`` and
    ``advance`` must agree with the number of steps taken.
    """
    violations: List[AxiomViolation] = []

    defined, first = _attempt(x.successor)
    if defined:
        _, second = _attempt(x.successor)
        if first != second:
            violations.append(AxiomViolation(
                SUCCESSOR_DETERMINISTIC,
                f"successor({x!r}) gave {first!r} then {second!r}", x))

    if end is _UNBOUNDED:
        return violations

    p, k = x, 0
    while p != end and k < max_steps:
        defined, p = _attempt(p.successor)
        if not defined:
            break
        k += 1
    if p != end:
        violations.append(AxiomViolation(
            END_REACHABLE,
            f"{end!r} is not reachable from {x!r} within {max_steps} steps", x))
        return violations

    measured = distance(x, end)
    if measured != k:
        violations.append(AxiomViolation(
            DISTANCE_COUNTS_STEPS,
            f"distance({x!r}, {end!r}) == {measured!r}, but {k} steps were taken", x))
    reached = advance(x, k)
    if reached != end:
        violations.append(AxiomViolation(
            ADVANCE_REACHES_END,
            f"advance({x!r}, {k}) == {reached!r}, expected {end!r}", x))
    return violations


def check_bidirectional(x) -> List[AxiomViolation]:
    """Check that ``successor`` and ``predecessor`` invert each other at ``x``."""
    violations: List[AxiomViolation] = []

    defined, after = _attempt(x.successor)
    if defined:
        defined, back = _attempt(after.predecessor)
        if defined and back != x:
            violations.append(AxiomViolation(
                PREDECESSOR_INVERTS_SUCCESSOR,
                f"predecessor(successor({x!r})) == {back!r}", x))

    defined, before = _attempt(x.predecessor)
    if defined:
        defined, forth = _attempt(before.successor)
        if defined and forth != x:
            violations.append(AxiomViolation(
                SUCCESSOR_INVERTS_PREDECESSOR,
                f"successor(predecessor({x!r})) == {forth!r}", x))
    return violations


def check_random_access(x, offsets: Iterable[int] = DEFAULT_OFFSETS) -> List[AxiomViolation]:
    """
    Check the RandomAccess axioms at ``x``, and the distance/advance inverse
    axioms for every offset in ``offsets``.
    """
    violations: List[AxiomViolation] = []

    def expect(axiom: str, actual, expected, description: str) -> None:
        if actual != expected:
            violations.append(AxiomViolation(
                axiom, f"{description} == {actual!r}, expected {expected!r}", x))

    expect(ADVANCED_BY_ZERO, x.advanced_by(0), x, f"advanced_by({x!r}, 0)")

    defined, after = _attempt(x.successor)
    if defined:
        expect(ADVANCED_BY_ONE, x.advanced_by(1), after, f"advanced_by({x!r}, 1)")
        expect(DISTANCE_TO_SUCCESSOR, x.distance_to(after), 1, f"distance_to({x!r}, successor)")

    defined, before = _attempt(x.predecessor)
    if defined:
        expect(ADVANCED_BY_MINUS_ONE, x.advanced_by(-1), before, f"advanced_by({x!r}, -1)")
        expect(DISTANCE_TO_PREDECESSOR, x.distance_to(before), -1, f"distance_to({x!r}, predecessor)")

    for m in offsets:
        defined, y = _attempt(lambda: x.advanced_by(m))
        if not defined:
            continue
        expect(DISTANCE_INVERTS_ADVANCE, x.distance_to(y), m, f"distance_to({x!r}, advanced_by({m}))")
        expect(ADVANCE_INVERTS_DISTANCE, x.advanced_by(x.distance_to(y)), y,
               f"advanced_by({x!r}, distance_to({y!r}))")
    return violations


def assert_axioms(x, offsets: Iterable[int] = DEFAULT_OFFSETS, end=_UNBOUNDED) -> None:
    """
    Run every check that applies to ``x``'s capability tier.

    Raises:
        AxiomViolationError: If any axiom fails
        CapabilityError: If ``x`` is not a position
    """
    tier = capability_tier(x)
    violations = check_steppable(x, end=end)
    if tier.satisfies(CapabilityTier.BIDIRECTIONAL):
        violations.extend(check_bidirectional(x))
    if tier.satisfies(CapabilityTier.RANDOM_ACCESS):
        violations.extend(check_random_access(x, offsets))

    if violations:
        logger.warning("%s failed %d axiom check(s) at %r", type(x).__name__, len(violations), x)
        raise AxiomViolationError(type(x), violations)
    logger.debug("%s satisfies %s axioms at %r", type(x).__name__, tier.value, x)
