"""Tests for in-place stepping through Cursor."""
import pytest

from stepwise import (CapabilityError, CapabilityTier, Cursor, Index,
                      PreconditionViolation, step_backward,
                      step_backward_returning_previous, step_forward,
                      step_forward_returning_previous)


class TestCursorForward:

    def setup_method(self):
        self.cursor = Cursor(Index(0))

    def test_step_forward_returns_new_value(self):
        assert self.cursor.step_forward() == Index(1)
        assert self.cursor.position == Index(1)

    def test_step_forward_returning_previous(self):
        assert self.cursor.step_forward_returning_previous() == Index(0)
        assert self.cursor.position == Index(1)

    def test_module_functions(self):
        assert step_forward(self.cursor) == Index(1)
        assert step_forward_returning_previous(self.cursor) == Index(1)
        assert self.cursor.position == Index(2)

    def test_advance_rebinds(self):
        assert self.cursor.advance(5) == Index(5)
        assert self.cursor.advance(10, Index(8)) == Index(8)
        assert self.cursor.position == Index(8)

    def test_tier(self):
        assert self.cursor.tier is CapabilityTier.RANDOM_ACCESS


class TestCursorBackward:

    def test_step_backward(self, bidi_int):
        cursor = Cursor(bidi_int(3))
        assert cursor.step_backward() == bidi_int(2)
        assert step_backward(cursor) == bidi_int(1)
        assert cursor.position == bidi_int(1)

    def test_step_backward_returning_previous(self, bidi_int):
        cursor = Cursor(bidi_int(3))
        assert step_backward_returning_previous(cursor) == bidi_int(3)
        assert cursor.position == bidi_int(2)

    def test_forward_only_cannot_step_backward(self, forward_int):
        cursor = Cursor(forward_int(3))
        with pytest.raises(CapabilityError, match="cannot step backward"):
            cursor.step_backward()
        with pytest.raises(CapabilityError):
            cursor.step_backward_returning_previous()
        assert cursor.position == forward_int(3)
        assert forward_int.calls['successor'] == 0

    def test_forward_only_negative_advance(self, forward_int):
        cursor = Cursor(forward_int(3))
        with pytest.raises(PreconditionViolation):
            cursor.advance(-1)
        assert cursor.position == forward_int(3)


class TestCursorBinding:

    def test_rejects_non_positions(self):
        with pytest.raises(CapabilityError):
            Cursor(42)

    def test_rebinding_to_another_type_reresolves(self, forward_int):
        cursor = Cursor(Index(0))
        cursor.position = forward_int(0)
        assert cursor.tier is CapabilityTier.STEPPABLE
        with pytest.raises(CapabilityError):
            cursor.step_backward()

    def test_cursors_are_independent(self):
        a = Cursor(Index(0))
        b = Cursor(a.position)
        a.step_forward()
        assert b.position == Index(0)

    def test_repr(self):
        assert repr(Cursor(Index(2))) == "Cursor(Index(offset=2))"
