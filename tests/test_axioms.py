"""Tests for axiom validation of conforming position types."""
from dataclasses import dataclass

import pytest

from stepwise import AxiomViolationError, CapabilityError, RandomAccess
from stepwise.validation import (assert_axioms, check_bidirectional,
                                 check_random_access, check_steppable)
from stepwise.validation.axioms import (ADVANCE_INVERTS_DISTANCE,
                                        DISTANCE_INVERTS_ADVANCE, END_REACHABLE,
                                        PREDECESSOR_INVERTS_SUCCESSOR)


@dataclass(frozen=True)
class DoubleJump(RandomAccess):
    """advanced_by moves twice as far as it should."""
    value: int

    def successor(self):
        return DoubleJump(self.value + 1)

    def predecessor(self):
        return DoubleJump(self.value - 1)

    def distance_to(self, other):
        return other.value - self.value

    def advanced_by(self, n):
        return DoubleJump(self.value + 2 * n)


@dataclass(frozen=True)
class Lopsided:
    """predecessor does not undo successor."""
    value: int

    def successor(self):
        return Lopsided(self.value + 1)

    def predecessor(self):
        return Lopsided(self.value - 2)


class TestChecks:

    def test_well_behaved_types_pass(self, forward_int, bidi_int, random_int):
        assert check_steppable(forward_int(0), end=forward_int(4)) == []
        assert check_bidirectional(bidi_int(0)) == []
        assert check_random_access(random_int(0)) == []

    def test_unreachable_end(self, forward_int):
        violations = check_steppable(forward_int(5), end=forward_int(0), max_steps=50)
        assert [v.axiom for v in violations] == [END_REACHABLE]

    def test_none_is_checked_as_an_end(self, forward_int):
        violations = check_steppable(forward_int(0), end=None, max_steps=20)
        assert [v.axiom for v in violations] == [END_REACHABLE]

    def test_reachability_skipped_without_end(self, forward_int):
        assert check_steppable(forward_int(0)) == []
        assert forward_int.calls['successor'] == 2

    def test_broken_inverse(self):
        violations = check_bidirectional(Lopsided(0))
        assert PREDECESSOR_INVERTS_SUCCESSOR in [v.axiom for v in violations]

    def test_broken_random_access(self):
        axioms = {v.axiom for v in check_random_access(DoubleJump(0), offsets=(2,))}
        assert DISTANCE_INVERTS_ADVANCE in axioms
        assert ADVANCE_INVERTS_DISTANCE in axioms

    def test_violation_str(self):
        violation = check_bidirectional(Lopsided(0))[0]
        assert str(violation).startswith("predecessor_inverts_successor: ")


class TestAssertAxioms:

    def test_passes_silently(self, random_int):
        assert assert_axioms(random_int(0), end=random_int(3)) is None

    def test_raises_with_all_violations(self):
        with pytest.raises(AxiomViolationError) as exc_info:
            assert_axioms(DoubleJump(0))
        error = exc_info.value
        assert error.position_type is DoubleJump
        assert len(error.violations) >= 2
        assert "DoubleJump violates" in str(error)

    def test_is_assertion_error(self):
        with pytest.raises(AssertionError):
            assert_axioms(Lopsided(0))

    def test_non_position(self):
        with pytest.raises(CapabilityError):
            assert_axioms(3.0)
