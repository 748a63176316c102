"""
Mutable cursors over immutable positions.

Positions are values; stepping "in place" means rebinding a variable. A
``Cursor`` is that variable, owned by the caller, so stepping it never touches
state shared with anyone else.

Each direction comes in two forms: one returns the new position, the other
returns the position held before the step.
"""

import logging

from stepwise.api import _UNBOUNDED, advance
from stepwise.constants.constants import CapabilityTier, ERROR_BACKWARD_STEP
from stepwise.core.exceptions import CapabilityError
from stepwise.dispatch.resolver import resolve_dispatch

logger = logging.getLogger(__name__)


class Cursor:
    """A rebindable position."""

    __slots__ = ('_position', '_dispatch')

    def __init__(self, position):
        self.position = position

    @property
    def position(self):
        return self._position

    @position.setter
    def position(self, value):
        self._dispatch = resolve_dispatch(type(value))
        self._position = value

    @property
    def tier(self) -> CapabilityTier:
        return self._dispatch.tier

    def _require_backward(self) -> None:
        if self._dispatch.tier is CapabilityTier.STEPPABLE:
            raise CapabilityError(ERROR_BACKWARD_STEP.format(type(self._position).__name__))

    def step_forward(self):
        """Rebind to the successor and return it."""
        self._position = self._position.successor()
        return self._position

    def step_forward_returning_previous(self):
        """Rebind to the successor and return the position held before the step."""
        previous = self._position
        self._position = previous.successor()
        return previous

    def step_backward(self):
        """
        Rebind to the predecessor and return it.

        Raises:
            CapabilityError: If the position is only Steppable
        """
        self._require_backward()
        self._position = self._position.predecessor()
        return self._position

    def step_backward_returning_previous(self):
        """Rebind to the predecessor and return the position held before the step."""
        self._require_backward()
        previous = self._position
        self._position = previous.predecessor()
        return previous

    def advance(self, n, end=_UNBOUNDED):
        """Rebind to ``advance(position, n[, end])`` and return the new position."""
        self._position = advance(self._position, n, end)
        return self._position

    def __repr__(self) -> str:
        return f"Cursor({self._position!r})"


def step_forward(cursor: Cursor):
    return cursor.step_forward()

def step_forward_returning_previous(cursor: Cursor):
    return cursor.step_forward_returning_previous()

def step_backward(cursor: Cursor):
    return cursor.step_backward()

def step_backward_returning_previous(cursor: Cursor):
    return cursor.step_backward_returning_previous()
