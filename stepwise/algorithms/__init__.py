"""
Algorithm variants for distance and advance, one module per capability tier.

Importing this package registers every variant in
``stepwise.dispatch.registry_base.ALGORITHM_REGISTRY``.
"""

from stepwise.algorithms import bidirectional, random_access, steppable

__all__ = [
    'steppable',
    'bidirectional',
    'random_access',
]
