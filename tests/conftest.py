"""Global pytest configuration for stepwise tests."""
from collections import Counter
from dataclasses import dataclass
from typing import ClassVar

import pytest

from stepwise import Bidirectional, clear_dispatch_cache, set_current_config


@dataclass(frozen=True)
class ForwardInt:
    """Integer position that can only step forward (structurally Steppable)."""
    value: int
    calls: ClassVar[Counter] = Counter()

    def successor(self):
        ForwardInt.calls['successor'] += 1
        return ForwardInt(self.value + 1)


@dataclass(frozen=True)
class BidiInt(Bidirectional):
    """Integer position stepping both ways (nominally Bidirectional)."""
    value: int
    calls: ClassVar[Counter] = Counter()

    def successor(self):
        BidiInt.calls['successor'] += 1
        return BidiInt(self.value + 1)

    def predecessor(self):
        BidiInt.calls['predecessor'] += 1
        return BidiInt(self.value - 1)


@dataclass(frozen=True)
class RandomInt:
    """Integer position with O(1) jumps (structurally RandomAccess)."""
    value: int
    calls: ClassVar[Counter] = Counter()

    def successor(self):
        RandomInt.calls['successor'] += 1
        return RandomInt(self.value + 1)

    def predecessor(self):
        RandomInt.calls['predecessor'] += 1
        return RandomInt(self.value - 1)

    def distance_to(self, other):
        RandomInt.calls['distance_to'] += 1
        return other.value - self.value

    def advanced_by(self, n):
        RandomInt.calls['advanced_by'] += 1
        return RandomInt(self.value + n)


@pytest.fixture(autouse=True)
def reset_stepwise_state():
    """Start every test with empty call counters, no cached dispatch and the default config."""
    for position_type in (ForwardInt, BidiInt, RandomInt):
        position_type.calls.clear()
    clear_dispatch_cache()
    set_current_config(None)
    yield
    clear_dispatch_cache()
    set_current_config(None)


@pytest.fixture
def forward_int():
    return ForwardInt


@pytest.fixture
def bidi_int():
    return BidiInt


@pytest.fixture
def random_int():
    return RandomInt
