"""
Utility functions for the stepwise package.
"""

import numbers

import numpy as np


def is_signed_integer_type(t) -> bool:
    """
    True if ``t`` can serve as a Distance type.

    Accepts ``int``, numpy signed integer scalar types, and other
    ``numbers.Integral`` types. Rejects ``bool`` and unsigned numpy types,
    which cannot count steps backward.
    """
    if not isinstance(t, type) or issubclass(t, (bool, np.bool_)):
        return False
    if issubclass(t, (int, np.integer)):
        return np.issubdtype(t, np.signedinteger)
    return issubclass(t, numbers.Integral)


def is_integer_offset(n) -> bool:
    """True if ``n`` is an integer step count (``bool`` excluded)."""
    return isinstance(n, numbers.Integral) and not isinstance(n, (bool, np.bool_))
