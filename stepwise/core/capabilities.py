"""
Capability tiers for positions.

A position is an opaque, equality-comparable value that marks a place in some
sequence domain. What a generic algorithm may do with it depends on which of
three nested capabilities the position's type provides:

    Steppable       successor()
    Bidirectional   + predecessor()
    RandomAccess    + distance_to(other), advanced_by(n), both O(1)

Each tier refines the previous one. A type can join a tier nominally, by
subclassing or ``Tier.register(cls)``, or structurally, by defining the tier's
whole method set; the structural check mirrors ``collections.abc``, including
opting out of a method by setting it to ``None``.

Every position type has an associated ``Distance``: the signed integer type
used to count steps between two of its values. It defaults to ``int``.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from stepwise.constants.constants import (CapabilityTier, DEFAULT_DISTANCE_TYPE,
                                          DISTANCE_ATTRIBUTE, TIER_METHODS)


def _has_methods(C: type, names: Iterable[str]):
    mro = C.__mro__
    for name in names:
        for base in mro:
            if name in base.__dict__:
                if base.__dict__[name] is None:
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True


class Steppable(ABC):
    """A position whose successor, if any, is reachable through ``successor()``."""

    __slots__ = ()

    Distance = DEFAULT_DISTANCE_TYPE

    @abstractmethod
    def successor(self):
        """
        Return the next consecutive position.

        Requires ``self`` to have a well-defined successor; asking for one past
        the end of the domain is a precondition violation, not a recoverable
        error.
        """
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C):
        if cls is Steppable:
            return _has_methods(C, TIER_METHODS[CapabilityTier.STEPPABLE])
        return NotImplemented


class Bidirectional(Steppable):
    """A position that can also step backward through ``predecessor()``."""

    __slots__ = ()

    @abstractmethod
    def predecessor(self):
        """
        Return the previous consecutive position.

        Where both are defined, ``x.successor().predecessor() == x`` and
        ``x.predecessor().successor() == x``.

        Requires ``self`` to have a well-defined predecessor.
        """
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C):
        if cls is Bidirectional:
            return _has_methods(C, TIER_METHODS[CapabilityTier.BIDIRECTIONAL])
        return NotImplemented


class RandomAccess(Bidirectional):
    """
    A position that can be offset by any number of steps, and can measure the
    distance to any reachable position, in O(1).

    Axioms::

        x.distance_to(x.successor()) == 1
        x.distance_to(x.predecessor()) == -1
        x.advanced_by(x.distance_to(y)) == y
        x.advanced_by(0) == x
        x.advanced_by(1) == x.successor()
        x.distance_to(x.advanced_by(m)) == m

    The generic algorithms assume these hold; a type breaking them is a logic
    error the core cannot detect.
    """

    __slots__ = ()

    @abstractmethod
    def distance_to(self, other):
        """Return the number of ``successor`` (positive) or ``predecessor``
        (negative) applications needed to reach ``other``. O(1)."""
        raise NotImplementedError

    @abstractmethod
    def advanced_by(self, n):
        """Return ``self`` offset by ``n`` steps, in either direction. O(1)."""
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C):
        if cls is RandomAccess:
            return _has_methods(C, TIER_METHODS[CapabilityTier.RANDOM_ACCESS])
        return NotImplemented


def distance_type_of(position_type: type) -> type:
    """The Distance type associated with ``position_type``."""
    return getattr(position_type, DISTANCE_ATTRIBUTE, DEFAULT_DISTANCE_TYPE)
