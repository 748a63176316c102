"""Core module for stepwise."""

# These imports are re-exported through __all__
from stepwise.core.capabilities import Bidirectional, RandomAccess, Steppable
from stepwise.core.exceptions import (CapabilityError, PreconditionViolation,
                                      StepwiseError, precondition)

__all__ = [
    'Steppable',
    'Bidirectional',
    'RandomAccess',
    'StepwiseError',
    'PreconditionViolation',
    'CapabilityError',
    'precondition',
]
