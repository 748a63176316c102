"""
Validation package for stepwise.

Opt-in checks that a position type honours the axioms of its capability tier.
"""

from stepwise.validation.axioms import (AxiomViolation, assert_axioms,
                                        check_bidirectional,
                                        check_random_access, check_steppable)

__all__ = [
    'AxiomViolation',
    'assert_axioms',
    'check_steppable',
    'check_bidirectional',
    'check_random_access',
]
