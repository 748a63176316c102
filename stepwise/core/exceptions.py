"""
Custom exceptions for the stepwise core.

Every contract violation surfaces as one of these, raised synchronously at the
point of violation. Nothing in stepwise catches or retries them.
"""

import logging

logger = logging.getLogger(__name__)


class StepwiseError(Exception):
    """Base class for all stepwise custom exceptions."""
    pass

class PreconditionViolation(StepwiseError, ValueError):
    """Raised when a caller breaks an operation's precondition, such as a negative
    offset on a forward-only position or a step outside a position's domain."""
    pass

class CapabilityError(StepwiseError, TypeError):
    """Raised when a position type lacks the capability an operation requires."""
    pass

class PositionTypeMismatchError(StepwiseError, TypeError):
    """Raised when positions of unrelated types are combined in one operation."""
    pass

class DistanceTypeError(StepwiseError, TypeError):
    """Raised when an offset or a declared Distance type is not a signed integer."""
    pass

class AlgorithmRegistrationError(StepwiseError, ValueError):
    """Raised when an algorithm variant would replace a different registered variant."""
    pass

class AxiomViolationError(StepwiseError, AssertionError):
    """Raised by strict axiom validation when a conforming type breaks its contract."""

    def __init__(self, position_type: type, violations):
        self.position_type = position_type
        self.violations = list(violations)
        details = "; ".join(str(v) for v in self.violations)
        super().__init__(
            f"{position_type.__name__} violates {len(self.violations)} axiom(s): {details}"
        )


def precondition(condition: bool, message: str) -> None:
    """
    Fail loudly if ``condition`` does not hold.

    Conforming position types call this from ``successor``/``predecessor``
    when asked to step outside their domain.

    Raises:
        PreconditionViolation: If ``condition`` is false
    """
    if not condition:
        logger.debug("Precondition failed: %s", message)
        raise PreconditionViolation(message)
