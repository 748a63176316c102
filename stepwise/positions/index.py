"""
Ready-made RandomAccess positions over integer offsets.

``Index`` is an unbounded integer position. ``BufferIndex`` addresses a
buffer of known length, ``0`` through ``length`` inclusive, where ``length``
is the past-the-end position; stepping outside that range is a precondition
violation. Its Distance is ``numpy.intp``, the platform's indexing integer.
"""

import operator
from dataclasses import dataclass

import numpy as np

from stepwise.core.capabilities import RandomAccess
from stepwise.core.exceptions import precondition


@dataclass(frozen=True, order=True)
class Index(RandomAccess):
    """An integer position with no bounds."""

    offset: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'offset', operator.index(self.offset))

    def successor(self) -> "Index":
        return Index(self.offset + 1)

    def predecessor(self) -> "Index":
        return Index(self.offset - 1)

    def distance_to(self, other: "Index") -> int:
        return other.offset - self.offset

    def advanced_by(self, n: int) -> "Index":
        return Index(self.offset + n)


@dataclass(frozen=True, order=True)
class BufferIndex(RandomAccess):
    """A position in a buffer of ``length`` elements."""

    offset: int
    length: int

    Distance = np.intp

    def __post_init__(self):
        object.__setattr__(self, 'offset', operator.index(self.offset))
        object.__setattr__(self, 'length', operator.index(self.length))
        precondition(self.length >= 0, f"Buffer length must be non-negative, got {self.length}")
        precondition(
            0 <= self.offset <= self.length,
            f"Offset {self.offset} is outside buffer bounds [0, {self.length}]"
        )

    @classmethod
    def over(cls, buffer) -> "BufferIndex":
        """The first position of ``buffer`` (anything with a ``len``, e.g. a numpy array)."""
        return cls(0, len(buffer))

    @classmethod
    def end_of(cls, buffer) -> "BufferIndex":
        """The past-the-end position of ``buffer``."""
        return cls(len(buffer), len(buffer))

    @property
    def is_end(self) -> bool:
        return self.offset == self.length

    def successor(self) -> "BufferIndex":
        precondition(not self.is_end, f"Cannot step past the end of a buffer of length {self.length}")
        return BufferIndex(self.offset + 1, self.length)

    def predecessor(self) -> "BufferIndex":
        precondition(self.offset > 0, "Cannot step before the start of a buffer")
        return BufferIndex(self.offset - 1, self.length)

    def distance_to(self, other: "BufferIndex") -> np.intp:
        precondition(
            other.length == self.length,
            f"Positions belong to different buffers (lengths {self.length} and {other.length})"
        )
        return np.intp(other.offset - self.offset)

    def advanced_by(self, n) -> "BufferIndex":
        target = self.offset + operator.index(n)
        precondition(
            0 <= target <= self.length,
            f"Offset {target} is outside buffer bounds [0, {self.length}]"
        )
        return BufferIndex(target, self.length)
